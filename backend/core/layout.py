"""
Page chrome shared by every page app: app header, content, auth modal.
"""
from typing import Optional

from fastapi import Request
from markupsafe import Markup

from core.auth_modal import render_auth_modal
from core.models.user import Viewer
from core.navigation import DEFAULT_APP_MENU, get_menu_tree, render_app_navigation
from core.rendering import render_template
from core.usermeta import UserMetaStore

APP_MENU_ID = "guestify-app"
ONBOARDING_PROGRESS_KEY = "guestify_onboarding_progress_percent"


def get_onboarding_progress(store: UserMetaStore, user_id: int) -> Optional[int]:
    """Cached onboarding percentage, None when it was never synced."""
    value = store.get(user_id, ONBOARDING_PROGRESS_KEY)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def request_uri(request: Request) -> str:
    """Path plus query string, e.g. '/account/?panel=billing'."""
    query = request.url.query
    return request.url.path + ("?" + query if query else "")


def render_page(
    viewer: Optional[Viewer],
    store: UserMetaStore,
    request_path: str,
    content: str,
    title: str = "Guestify",
    body_class: str = "",
    request_uri: Optional[str] = None,
) -> str:
    header = ""
    if viewer is not None:
        header = render_app_navigation(
            viewer,
            get_menu_tree(APP_MENU_ID, DEFAULT_APP_MENU),
            request_path,
            onboarding_progress=get_onboarding_progress(store, viewer.id),
        )

    return render_template(
        "layout.html",
        title=title,
        body_class=body_class,
        header=Markup(header),
        content=Markup(content),
        auth_modal=Markup(render_auth_modal(viewer, request_uri or request_path)),
    )
