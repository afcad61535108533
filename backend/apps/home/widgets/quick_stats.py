"""
Quick Stats widget - pitches, interviews, episodes and tracked revenue.
"""
from typing import Optional

from core.formatting import format_stat_number
from core.models import QuickStats
from core.rendering import render_template

from apps import FragmentManifest
from apps.home.services import HomeContext


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="quick-stats",
        label="Quick Stats",
        icon="fa-solid fa-chart-simple",
        order=10,
        render_path="apps.home.widgets.quick_stats:render",
    )


def build_stats(stats: Optional[QuickStats]) -> list:
    stats = stats or QuickStats()
    return [
        {"key": "pitches", "label": "Pitches This Month", "icon": "fa-paper-plane", "tone": "info",
         "value": stats.pitches},
        {"key": "interviews", "label": "Interviews Booked", "icon": "fa-calendar-check", "tone": "success",
         "value": stats.interviews},
        {"key": "episodes", "label": "Episodes Aired", "icon": "fa-podcast", "tone": "purple",
         "value": stats.episodes},
        {"key": "revenue", "label": "Revenue Tracked", "icon": "fa-dollar-sign", "tone": "success",
         "value": format_stat_number(stats.revenue, is_currency=True)},
    ]


def render_quick_stats(stats: Optional[QuickStats]) -> str:
    return render_template("home/quick-stats.html", stats=build_stats(stats))


async def render(ctx: HomeContext) -> str:
    return render_quick_stats(ctx.dashboard.stats)
