"""
Authority Score widget - overall score with trend and five-dimension breakdown.
"""
from typing import Optional

from core.formatting import ucfirst
from core.models import AuthorityScore
from core.rendering import render_template

from apps import FragmentManifest
from apps.home.services import HomeContext

DIMENSIONS = [
    ("appearance_score", "Appearances", "fa-podcast"),
    ("social_score", "Social Reach", "fa-share-nodes"),
    ("profile_score", "Profile", "fa-user-check"),
    ("content_score", "Content", "fa-file-lines"),
    ("network_score", "Network", "fa-diagram-project"),
]

TRENDS = {
    "up": ("fa-arrow-up", "positive"),
    "down": ("fa-arrow-down", "negative"),
}


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="authority-score",
        label="Authority Score",
        icon="fa-solid fa-crown",
        order=30,
        render_path="apps.home.widgets.authority_score:render",
    )


def score_class(score: int) -> str:
    if score >= 70:
        return "high"
    if score >= 40:
        return "medium"
    return "low"


def render_authority_score(authority: Optional[AuthorityScore]) -> str:
    """Widget markup, '' when there is no score yet."""
    if authority is None or authority.overall_score is None:
        return ""

    score = int(authority.overall_score)
    trend_icon, trend_class = TRENDS.get(authority.trend, ("fa-minus", "neutral"))

    dimensions = []
    if authority.breakdown:
        dimensions = [
            {"label": label, "icon": icon, "score": int(authority.breakdown.get(key, 0))}
            for key, label, icon in DIMENSIONS
        ]

    return render_template(
        "home/authority-score.html",
        score=score,
        score_class=score_class(score),
        trend_label=ucfirst(authority.trend),
        trend_icon=trend_icon,
        trend_class=trend_class,
        dimensions=dimensions,
    )


async def render(ctx: HomeContext) -> str:
    return render_authority_score(ctx.dashboard.authority)
