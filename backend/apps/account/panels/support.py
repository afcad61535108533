"""
Support panel - contact form and support resources.
"""
from typing import Optional

from config import settings
from core.models import UserProfile
from core.rendering import render_template

from apps import FragmentManifest
from apps.account.services import AccountContext, load_user_data

SUPPORT_NONCE_ACTION = "guestify_support_contact"
SUPPORT_NONCE_FIELD = "support_nonce"
SUPPORT_FORM_ACTION = "guestify_support_contact"

SUPPORT_RESOURCES = [
    {"path": "/help/", "label": "Help Center & FAQs", "icon": "fa-circle-question", "color": "red"},
    {"path": "/tutorials/", "label": "Video Tutorials", "icon": "fa-play", "color": "teal"},
    {"path": "/docs/", "label": "Documentation", "icon": "fa-chart-simple", "color": "green"},
    {"path": "/community/", "label": "Community Forum", "icon": "fa-users", "color": "purple"},
    {"path": "/demo/", "label": "Book a Demo Call", "icon": "fa-calendar", "color": "pink"},
]


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="support",
        label="Support",
        icon="fa-solid fa-headset",
        order=70,
        render_path="apps.account.panels.support:render",
    )


def render_support_panel(user_data: Optional[UserProfile], user_id: int) -> str:
    return render_template(
        "account/panel-support.html",
        user=user_data or UserProfile(),
        user_id=user_id,
        form_handler_url=settings.form_handler_url,
        form_action=SUPPORT_FORM_ACTION,
        nonce_action=SUPPORT_NONCE_ACTION,
        nonce_name=SUPPORT_NONCE_FIELD,
        resources=SUPPORT_RESOURCES,
    )


async def render(ctx: AccountContext) -> str:
    return render_support_panel(load_user_data(ctx.viewer, ctx.store), ctx.viewer.id)
