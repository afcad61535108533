"""
General panel - personal information form.
"""
from typing import Optional

from core.models import UserProfile
from core.rendering import render_template

from apps import FragmentManifest
from apps.account.services import AccountContext, load_user_data

PROFILE_NONCE_ACTION = "guestify_account_profile"
PROFILE_NONCE_FIELD = "profile_nonce"


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="general",
        label="General",
        icon="fa-solid fa-user",
        order=10,
        render_path="apps.account.panels.general:render",
    )


def render_general_panel(user_data: Optional[UserProfile], user_id: int) -> str:
    return render_template(
        "account/panel-general.html",
        user=user_data or UserProfile(),
        user_id=user_id,
        nonce_action=PROFILE_NONCE_ACTION,
        nonce_name=PROFILE_NONCE_FIELD,
    )


async def render(ctx: AccountContext) -> str:
    return render_general_panel(load_user_data(ctx.viewer, ctx.store), ctx.viewer.id)
