"""
App navigation header - menu tree, active state, icons, rendering.

The menu arrives as a flat list of items (parent == 0 for top level). It is
grouped into a two-level tree once, and the desktop and mobile variants are
both rendered from that same tree.
"""
from typing import Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from core.auth import create_nonce
from core.cache import cache_get, cache_set
from core.models.navigation import MenuItem, MenuNode
from core.models.user import Viewer
from core.rendering import render_template, rest_url


# Paths that show the app header, only for signed-in viewers
LOGIN_REQUIRED_PATHS = ["/app", "/account", "/courses", "/onboarding"]
PUBLIC_TOOL_PATHS = ["/tools", "/templates"]

# Title substring -> Font Awesome icon. Order matters: more specific first.
MENU_ICONS = [
    # Prospector section
    ("prospector", "fa-magnifying-glass"),
    ("episodes by person", "fa-user-check"),
    ("podcasts by title", "fa-microphone"),
    ("advanced podcasts", "fa-podcast"),
    ("advanced episodes", "fa-circle-play"),
    # Pipeline section
    ("pipeline", "fa-layer-group"),
    ("board", "fa-table-columns"),
    ("list", "fa-list"),
    ("my interviews", "fa-microphone-lines"),
    ("portfolio", "fa-briefcase"),
    ("calendar", "fa-calendar"),
    ("notes", "fa-note-sticky"),
    ("tasks", "fa-list-check"),
    # Outreach section
    ("outreach", "fa-paper-plane"),
    ("campaigns", "fa-bullhorn"),
    ("templates", "fa-file-lines"),
    # Media Kit section
    ("media kit", "fa-id-card"),
    ("my profiles", "fa-user"),
    ("ai content", "fa-wand-magic-sparkles"),
    ("my media kits", "fa-folder-open"),
    # Insights section
    ("insights", "fa-chart-pie"),
    ("performance", "fa-chart-line"),
    ("reports", "fa-file-chart-column"),
    # General
    ("dashboard", "fa-gauge-high"),
    ("analytics", "fa-chart-simple"),
    ("settings", "fa-gear"),
    ("account", "fa-gear"),
    ("training", "fa-graduation-cap"),
    ("courses", "fa-graduation-cap"),
    ("tools", "fa-screwdriver-wrench"),
    ("profile", "fa-user"),
    ("help", "fa-circle-question"),
    ("logout", "fa-right-from-bracket"),
]
DEFAULT_MENU_ICON = "fa-circle"

# Dropdown section labels and dividers, keyed by lowercased parent title
DROPDOWN_SECTIONS = {
    "prospector": {
        "label_at_start": "Search By",
        "breaks": [{"after": "Podcasts by Title", "divider": True, "label": "Advanced"}],
    },
    "pipeline": {
        "breaks": [{"after": "My Interviews", "divider": True}],
    },
    "outreach": {
        "breaks": [{"after": "Templates", "divider": True}],
    },
    "media kit": {
        "label_at_start": "Profile",
        "breaks": [
            {"after": "Social Links", "divider": True, "label": "Media Kit"},
            {"after": "AI Content Tools", "divider": True},
        ],
    },
    "insights": {},
}

# Used when the CMS has no menu assigned to the app location
DEFAULT_APP_MENU = [
    MenuItem(id=1, title="Dashboard", url="/app/"),
    MenuItem(id=10, title="Prospector", url="/app/prospector/"),
    MenuItem(id=11, parent=10, title="Episodes by Person", url="/app/prospector/episodes/"),
    MenuItem(id=12, parent=10, title="Podcasts by Title", url="/app/prospector/search/"),
    MenuItem(id=13, parent=10, title="Advanced Podcasts", url="/app/prospector/advanced-podcasts/"),
    MenuItem(id=14, parent=10, title="Advanced Episodes", url="/app/prospector/advanced-episodes/"),
    MenuItem(id=20, title="Pipeline", url="/app/pipeline/"),
    MenuItem(id=21, parent=20, title="Board", url="/app/pipeline/"),
    MenuItem(id=22, parent=20, title="List", url="/app/pipeline/list/"),
    MenuItem(id=23, parent=20, title="My Interviews", url="/app/interviews/"),
    MenuItem(id=24, parent=20, title="Calendar", url="/app/calendar/"),
    MenuItem(id=25, parent=20, title="Tasks", url="/app/tasks/"),
    MenuItem(id=30, title="Outreach", url="/app/outreach/"),
    MenuItem(id=31, parent=30, title="Campaigns", url="/app/outreach/campaigns/"),
    MenuItem(id=32, parent=30, title="Templates", url="/app/outreach/templates/"),
    MenuItem(id=33, parent=30, title="Reports", url="/app/outreach/reports/"),
    MenuItem(id=40, title="Media Kit", url="/app/media-kit/"),
    MenuItem(id=41, parent=40, title="My Profiles", url="/app/media-kit/profile/"),
    MenuItem(id=42, parent=40, title="Social Links", url="/app/media-kit/social/"),
    MenuItem(id=43, parent=40, title="AI Content Tools", url="/app/media-kit/ai-content/"),
    MenuItem(id=44, parent=40, title="My Media Kits", url="/app/media-kit/kits/"),
    MenuItem(id=50, title="Insights", url="/app/insights/"),
    MenuItem(id=51, parent=50, title="Performance", url="/app/insights/performance/"),
]


def _path_matches(url_path: str, app_path: str) -> bool:
    return url_path == app_path or url_path.startswith(app_path + "/")


def is_app_page(path: str, logged_in: bool, section: str = "") -> bool:
    """
    Whether the app header belongs on this path.
    With a section, the path must also sit under '<app path>/<section>'.
    """
    url_path = urlsplit(path).path.rstrip("/")

    for app_path in LOGIN_REQUIRED_PATHS + PUBLIC_TOOL_PATHS:
        if _path_matches(url_path, app_path):
            if not logged_in:
                return False
            if not section:
                return True
            return url_path.startswith(f"{app_path}/{section}")

    return False


def is_menu_item_active(url: str, current_path: str) -> bool:
    """Exact match, or current path is a sub-page of a non-root menu path."""
    menu_path = urlsplit(url).path
    if current_path == menu_path:
        return True
    return len(menu_path) > 1 and current_path.startswith(menu_path + "/")


def get_menu_icon(title: str) -> str:
    title_lower = title.lower()
    for key, icon in MENU_ICONS:
        if key in title_lower:
            return icon
    return DEFAULT_MENU_ICON


def build_menu_tree(items: Iterable[MenuItem]) -> List[MenuNode]:
    """
    Group a flat menu list by parent id, keeping the original order.
    Children whose parent is not a top-level item are dropped.
    """
    items = list(items)
    nodes: Dict[int, MenuNode] = {}
    for item in items:
        if item.parent == 0:
            nodes[item.id] = MenuNode(item=item)

    for item in items:
        if item.parent != 0 and item.parent in nodes:
            nodes[item.parent].children.append(item)

    return list(nodes.values())


def get_menu_tree(menu_id: str, items: Iterable[MenuItem]) -> List[MenuNode]:
    """build_menu_tree(), memoised per menu in the `nav` cache pool."""
    cached = cache_get("nav", menu_id)
    if cached is not None:
        return cached
    tree = build_menu_tree(items)
    cache_set("nav", menu_id, tree)
    return tree


def dropdown_entries(node: MenuNode) -> List[dict]:
    """
    Flatten a node's children into dropdown rows: section labels, links and
    dividers, following DROPDOWN_SECTIONS for the parent.
    """
    config = DROPDOWN_SECTIONS.get(node.item.title.lower(), {})
    entries = []

    if config.get("label_at_start"):
        entries.append({"kind": "label", "text": config["label_at_start"]})

    for child in node.children:
        entries.append({"kind": "link", "item": child})
        for section_break in config.get("breaks", []):
            if section_break["after"] != child.title:
                continue
            if section_break.get("divider"):
                entries.append({"kind": "divider"})
            if section_break.get("label"):
                entries.append({"kind": "label", "text": section_break["label"]})

    return entries


def render_app_navigation(
    viewer: Optional[Viewer],
    menu_tree: List[MenuNode],
    current_path: str,
    onboarding_progress: Optional[int] = None,
) -> str:
    """Header markup, or '' when the path is not an app page."""
    if not is_app_page(current_path, viewer is not None):
        return ""

    return render_template(
        "app-navigation.html",
        viewer=viewer,
        menu_tree=menu_tree,
        current_path=current_path,
        onboarding_progress=onboarding_progress,
        is_active=is_menu_item_active,
        menu_icon=get_menu_icon,
        dropdown_entries=dropdown_entries,
        nav_config={
            "nonce": create_nonce("wp_rest", viewer.id),
            "restUrl": rest_url(),
        },
    )
