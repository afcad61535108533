"""
Team panel - workspace members and pending invitations.
"""
from typing import List, Optional

from core.models import Invitation, TeamMember, UserProfile
from core.rendering import render_template

from apps import FragmentManifest
from apps.account.config import PENDING_INVITATIONS_META_KEY, TEAM_MEMBERS_META_KEY
from apps.account.services import AccountContext, load_model_list, load_user_data

OWNER_ROLE = "Owner"


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="team",
        label="Team Members",
        icon="fa-solid fa-users",
        order=40,
        render_path="apps.account.panels.team:render",
    )


def can_remove_member(member: TeamMember, viewer_id: int) -> bool:
    """Owners and the viewer themselves cannot be removed."""
    return member.role != OWNER_ROLE and member.id != viewer_id


def render_team_panel(
    members: List[TeamMember],
    invitations: List[Invitation],
    user_data: Optional[UserProfile],
    viewer_id: int,
) -> str:
    rows = [
        {"member": member, "removable": can_remove_member(member, viewer_id)}
        for member in members
    ]
    return render_template(
        "account/panel-team.html",
        members=rows,
        invitations=invitations,
        owner=user_data or UserProfile(),
    )


async def render(ctx: AccountContext) -> str:
    user_id = ctx.viewer.id
    return render_team_panel(
        load_model_list(ctx.store, user_id, TEAM_MEMBERS_META_KEY, TeamMember),
        load_model_list(ctx.store, user_id, PENDING_INVITATIONS_META_KEY, Invitation),
        load_user_data(ctx.viewer, ctx.store),
        user_id,
    )
