"""
Pillars widget - the four workspace shortcuts, ordered and worded per goal.

The first pillar in the goal's order is the priority card and carries the
Recommended badge.
"""
from typing import Dict, List, Optional

from core.models import PillarStatus
from core.rendering import home_url, render_template

from apps import FragmentManifest
from apps.home.services import HomeContext

PILLARS = {
    "media_kit": {
        "title": "Media Kit",
        "description": "Update your bio, photos, topics, and speaking credentials.",
        "icon": "fa-solid fa-id-card",
        "path": "/app/profiles/",
        "variant": "identity",
        "default_status": "Profile Ready",
    },
    "prospector": {
        "title": "Prospector",
        "description": "Find podcasts matching your niche and audience.",
        "icon": "fa-solid fa-magnifying-glass",
        "path": "/app/prospector/",
        "variant": "discovery",
        "default_status": "0 Saved Shows",
    },
    "showauthority": {
        "title": "ShowAuthority",
        "description": "Research shows and get AI-powered pitch angles.",
        "icon": "fa-solid fa-brain",
        "path": "/app/interviews/",
        "variant": "intel",
        "default_status": "0 Ready to Pitch",
    },
    "outreach": {
        "title": "Outreach",
        "description": "Send campaigns and manage your inbox.",
        "icon": "fa-solid fa-paper-plane",
        "path": "/app/email-system/",
        "variant": "action",
        "default_status": "No Messages",
    },
}

DEFAULT_PILLAR_ORDER = ["media_kit", "prospector", "showauthority", "outreach"]

GOAL_PILLAR_ORDER = {
    "build_authority": ["media_kit", "showauthority", "outreach", "prospector"],
    "grow_revenue": ["prospector", "showauthority", "outreach", "media_kit"],
    "launch_promote": ["outreach", "prospector", "showauthority", "media_kit"],
}

GOAL_DESCRIPTIONS = {
    "build_authority": {
        "media_kit": "Perfect your professional image and credibility.",
        "showauthority": "Position yourself as the go-to expert.",
        "outreach": "Reach top-tier shows in your space.",
        "prospector": "Discover authority-building opportunities.",
    },
    "grow_revenue": {
        "media_kit": "Showcase your offers and conversion-focused content.",
        "showauthority": "Research high-converting podcast audiences.",
        "outreach": "Book appearances that drive sales.",
        "prospector": "Find shows with your ideal buyers.",
    },
    "launch_promote": {
        "media_kit": "Highlight your launch story and offer.",
        "showauthority": "Plan your interview tour strategy.",
        "outreach": "Execute your launch blitz campaign.",
        "prospector": "Build your launch show list fast.",
    },
}

GOAL_CTAS = {
    "build_authority": {
        "media_kit": "Polish Profile",
        "showauthority": "Build Authority",
        "outreach": "Reach Out",
        "prospector": "Discover",
    },
    "grow_revenue": {
        "media_kit": "Optimize",
        "showauthority": "Research",
        "outreach": "Convert",
        "prospector": "Find Buyers",
    },
    "launch_promote": {
        "media_kit": "Prepare",
        "showauthority": "Plan Tour",
        "outreach": "Launch Blitz",
        "prospector": "Build List",
    },
}

DEFAULT_CTA = "Open"


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="pillars",
        label="Workspace",
        icon="fa-solid fa-table-cells-large",
        order=20,
        render_path="apps.home.widgets.pillars:render",
    )


def pillar_order(goal: str) -> List[str]:
    return list(GOAL_PILLAR_ORDER.get(goal, DEFAULT_PILLAR_ORDER))


def build_pillars(goal: str, statuses: Optional[Dict[str, PillarStatus]] = None) -> List[dict]:
    """Pillar cards in display order for `goal`, live status merged over defaults."""
    statuses = statuses or {}
    order = pillar_order(goal)
    priority = order[0]

    cards = []
    for key in order:
        config = PILLARS.get(key)
        if config is None:
            continue
        status = statuses.get(key) or PillarStatus()
        url = home_url(config["path"])
        cards.append({
            "key": key,
            "title": config["title"],
            "icon": config["icon"],
            "url": url,
            "variant": config["variant"],
            "description": GOAL_DESCRIPTIONS.get(goal, {}).get(key, config["description"]),
            "cta": GOAL_CTAS.get(goal, {}).get(key, DEFAULT_CTA),
            "status_text": status.status_text if status.status_text is not None else config["default_status"],
            "is_alert": status.is_alert,
            "show_dot": status.show_dot,
            "status_icon": status.icon,
            "is_priority": key == priority,
        })
    return cards


def render_pillars(goal: str, statuses: Optional[Dict[str, PillarStatus]] = None) -> str:
    return render_template("home/pillars.html", goal=goal, pillars=build_pillars(goal, statuses))


async def render(ctx: HomeContext) -> str:
    return render_pillars(ctx.dashboard.current_goal, ctx.dashboard.pillars)
