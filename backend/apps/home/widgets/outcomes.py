"""
Outcomes widget - revenue captured, audience reached, active partners.

The card matching the current goal is highlighted. Goals are accepted either
as the home goal ids ('grow_revenue') or the short outcome ids ('revenue').
"""
from typing import Optional

from core.formatting import format_audience, format_currency, number_format
from core.models import Outcomes
from core.rendering import render_template

from apps import FragmentManifest
from apps.home.services import HomeContext

OUTCOME_GOALS = {
    "grow_revenue": "revenue",
    "build_authority": "authority",
    "launch_promote": "launch",
}
DEFAULT_OUTCOME_GOAL = "revenue"


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="outcomes",
        label="Outcomes",
        icon="fa-solid fa-sack-dollar",
        order=60,
        render_path="apps.home.widgets.outcomes:render",
    )


def outcome_goal(goal: Optional[str]) -> str:
    if not goal:
        return DEFAULT_OUTCOME_GOAL
    return OUTCOME_GOALS.get(goal, goal)


def build_outcome_cards(outcomes: Optional[Outcomes], goal: Optional[str] = None) -> list:
    outcomes = outcomes or Outcomes()
    highlighted = outcome_goal(goal)
    cards = [
        {
            "id": "revenue",
            "variant": "capture",
            "icon": "fa-sack-dollar",
            "title": "Capture (Revenue)",
            "value": format_currency(outcomes.revenue),
            "sub": outcomes.revenue_change or "This period",
            "sub_success": bool(outcomes.revenue_change),
        },
        {
            "id": "authority",
            "variant": "connect",
            "icon": "fa-users-viewfinder",
            "title": "Connect (Reach)",
            "value": format_audience(outcomes.audience),
            "sub": "Total Audience",
            "sub_success": False,
        },
        {
            "id": "launch",
            "variant": "collab",
            "icon": "fa-handshake",
            "title": "Collaborate (Deals)",
            "value": number_format(outcomes.partners),
            "sub": "Active Partners",
            "sub_success": False,
        },
    ]
    for card in cards:
        card["highlight"] = card["id"] == highlighted
    return cards


def render_outcomes(outcomes: Optional[Outcomes], goal: Optional[str] = None) -> str:
    return render_template("home/outcomes.html", cards=build_outcome_cards(outcomes, goal))


async def render(ctx: HomeContext) -> str:
    return render_outcomes(ctx.dashboard.outcomes, ctx.dashboard.current_goal)
