"""
App Home - page routes.

- GET /app/                      Dashboard page
- GET /app/widgets/{widget}      Single widget fragment (client refresh)
"""
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from markupsafe import Markup

from core.auth import create_nonce, get_viewer
from core.formatting import weekday_date
from core.layout import render_page, request_uri
from core.models import Viewer
from core.rendering import login_url, render_template, rest_url
from core.usermeta import UserMetaStore, get_user_meta_store

from apps import FragmentManifest, load_render
from apps.home import get_manifest
from apps.home.config import GOAL_BUTTONS
from apps.home.services import HomeContext, build_home_context

router = APIRouter()

_widgets: Optional[List[FragmentManifest]] = None


def get_widgets() -> List[FragmentManifest]:
    global _widgets
    if _widgets is None:
        _widgets = get_manifest().fragments
    return _widgets


def get_home_context(
    viewer: Optional[Viewer] = Depends(get_viewer),
    store: UserMetaStore = Depends(get_user_meta_store),
) -> Optional[HomeContext]:
    if viewer is None:
        return None
    return build_home_context(viewer, store)


async def render_widgets(ctx: HomeContext) -> Dict[str, Markup]:
    """Every discovered widget, keyed by fragment id."""
    rendered = {}
    for manifest in get_widgets():
        rendered[manifest.fragment_id] = Markup(await load_render(manifest)(ctx))
    return rendered


def home_config(ctx: HomeContext) -> dict:
    """Bootstrap config for the home script."""
    return {
        "apiUrl": rest_url(),
        "nonce": create_nonce("wp_rest", ctx.viewer.id),
        "userName": ctx.viewer.greeting_name,
        "currentGoal": ctx.dashboard.current_goal,
        "userId": ctx.viewer.id,
    }


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    ctx: Optional[HomeContext] = Depends(get_home_context),
):
    """Dashboard home. Anonymous visitors are sent to the login page."""
    if ctx is None:
        return RedirectResponse(login_url(str(request.url)), status_code=302)

    content = render_template(
        "home/home-page.html",
        user_name=ctx.viewer.greeting_name,
        date_text=weekday_date(date.today()),
        tasks_due=ctx.dashboard.tasks_due,
        current_goal=ctx.dashboard.current_goal,
        goal_buttons=GOAL_BUTTONS,
        widgets=await render_widgets(ctx),
        home_config=home_config(ctx),
    )
    return render_page(
        ctx.viewer,
        ctx.store,
        request.url.path,
        content,
        title="Home",
        body_class="gfy-home-page",
        request_uri=request_uri(request),
    )


@router.get("/widgets/{widget}", response_class=HTMLResponse)
async def home_widget(
    widget: str,
    ctx: Optional[HomeContext] = Depends(get_home_context),
):
    """Single widget fragment."""
    if ctx is None:
        raise HTTPException(status_code=401, detail="Not signed in")

    manifest = next((w for w in get_widgets() if w.fragment_id == widget), None)
    if manifest is None:
        raise HTTPException(status_code=404, detail=f"Unknown widget '{widget}'")

    return await load_render(manifest)(ctx)
