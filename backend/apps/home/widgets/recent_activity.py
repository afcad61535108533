"""
Recent Activity widget - the "Jump Back In" list.
"""
from datetime import datetime
from typing import List, Optional

from core.formatting import relative_time
from core.models import ActivityItem
from core.rendering import home_url, render_template

from apps import FragmentManifest
from apps.home.services import HomeContext

MAX_ITEMS = 5


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="recent-activity",
        label="Jump Back In",
        icon="fa-solid fa-clock-rotate-left",
        order=40,
        render_path="apps.home.widgets.recent_activity:render",
    )


def get_started_item() -> ActivityItem:
    return ActivityItem(
        type="draft",
        icon="fa-solid fa-pen-to-square",
        title="Get Started",
        subtitle="Complete your profile to unlock all features",
        url=home_url("/app/profiles/"),
    )


def build_activity(items: Optional[List[ActivityItem]], now: Optional[datetime] = None) -> List[dict]:
    """At most five rows; a single Get Started row when there is no activity."""
    items = list(items or []) or [get_started_item()]
    return [
        {
            "item": item,
            "activity_id": "" if item.id is None else str(item.id),
            "when": relative_time(item.timestamp, now) if item.timestamp else "",
        }
        for item in items[:MAX_ITEMS]
    ]


def render_recent_activity(items: Optional[List[ActivityItem]], now: Optional[datetime] = None) -> str:
    return render_template("home/recent-activity.html", activities=build_activity(items, now))


async def render(ctx: HomeContext) -> str:
    return render_recent_activity(ctx.dashboard.recent_activity)
