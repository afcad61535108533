"""
Account Settings - page routes.

- GET /account/?panel=<id>           Full page with sidebar and active panel
- GET /account/panels/{panel}        Single panel fragment (for in-page switching)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from core.auth import get_viewer
from core.credits import CreditRepository, TierResolver, get_credit_repository, get_tier_resolver
from core.layout import render_page, request_uri
from core.models import Viewer
from core.rendering import login_url, render_template
from core.usermeta import UserMetaStore, get_user_meta_store

from apps import FragmentManifest, load_render
from apps.account import get_manifest
from apps.account.services import AccountContext, resolve_panel

router = APIRouter()

_panels: Optional[List[FragmentManifest]] = None


def get_panels() -> List[FragmentManifest]:
    global _panels
    if _panels is None:
        _panels = get_manifest().fragments
    return _panels


def get_account_context(
    viewer: Optional[Viewer] = Depends(get_viewer),
    store: UserMetaStore = Depends(get_user_meta_store),
    credit_repository: CreditRepository = Depends(get_credit_repository),
    tier_resolver: TierResolver = Depends(get_tier_resolver),
) -> Optional[AccountContext]:
    if viewer is None:
        return None
    return AccountContext(
        viewer=viewer,
        store=store,
        credit_repository=credit_repository,
        tier_resolver=tier_resolver,
    )


async def render_panel(panel_id: str, ctx: AccountContext) -> str:
    manifest = next(p for p in get_panels() if p.fragment_id == panel_id)
    return await load_render(manifest)(ctx)


@router.get("/", response_class=HTMLResponse)
async def account_page(
    request: Request,
    panel: Optional[str] = Query(None),
    ctx: Optional[AccountContext] = Depends(get_account_context),
):
    """Account settings page. Anonymous visitors are sent to the login page."""
    if ctx is None:
        return RedirectResponse(login_url(str(request.url)), status_code=302)

    panels = get_panels()
    current_panel = resolve_panel(panel, [p.fragment_id for p in panels])

    content = render_template(
        "account/account-page.html",
        panels=panels,
        current_panel=current_panel,
        panel_html=await render_panel(current_panel, ctx),
    )
    return render_page(
        ctx.viewer,
        ctx.store,
        request.url.path,
        content,
        title="Account Settings",
        body_class="gfy-account-page",
        request_uri=request_uri(request),
    )


@router.get("/panels/{panel}", response_class=HTMLResponse)
async def account_panel(
    panel: str,
    ctx: Optional[AccountContext] = Depends(get_account_context),
):
    """Single panel fragment."""
    if ctx is None:
        raise HTTPException(status_code=401, detail="Not signed in")

    if panel not in [p.fragment_id for p in get_panels()]:
        raise HTTPException(status_code=404, detail=f"Unknown panel '{panel}'")

    return await render_panel(panel, ctx)
