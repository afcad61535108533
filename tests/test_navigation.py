import json
import re

from core.cache import cache_get
from core.models import MenuItem, Viewer
from core.navigation import (
    DEFAULT_APP_MENU,
    DEFAULT_MENU_ICON,
    build_menu_tree,
    dropdown_entries,
    get_menu_icon,
    get_menu_tree,
    is_app_page,
    is_menu_item_active,
    render_app_navigation,
)
from core.rendering import rest_url


def _viewer():
    return Viewer(id=3, display_name="Grace Hopper", first_name="Grace", last_name="Hopper", email="grace@example.com")


def test_is_app_page_requires_login():
    assert is_app_page("/app/", True)
    assert is_app_page("/account/?panel=billing", True)
    assert is_app_page("/tools/guest-pitch/", True)
    assert not is_app_page("/app/", False)
    assert not is_app_page("/pricing/", True)
    assert not is_app_page("/application/", True)
    assert not is_app_page("/", True)


def test_is_app_page_with_section():
    assert is_app_page("/app/pipeline/list/", True, section="pipeline")
    assert not is_app_page("/app/outreach/", True, section="pipeline")


def test_is_menu_item_active():
    assert is_menu_item_active("/app/", "/app/")
    assert is_menu_item_active("https://guestify.test/app/pipeline", "/app/pipeline/list/")
    assert not is_menu_item_active("/app/", "/app/pipeline/")
    assert not is_menu_item_active("/", "/app/")
    assert not is_menu_item_active("/app/pipe", "/app/pipeline/")


def test_menu_icons():
    assert get_menu_icon("Prospector") == "fa-magnifying-glass"
    assert get_menu_icon("Episodes by Person") == "fa-user-check"
    assert get_menu_icon("Account Settings") == "fa-gear"
    assert get_menu_icon("Something New") == DEFAULT_MENU_ICON


def test_build_menu_tree_groups_children_and_drops_orphans():
    items = [
        MenuItem(id=5, parent=1, title="Child before parent", url="/a/child/"),
        MenuItem(id=1, title="A", url="/a/"),
        MenuItem(id=2, title="B", url="/b/"),
        MenuItem(id=6, parent=1, title="Second child", url="/a/second/"),
        MenuItem(id=7, parent=99, title="Orphan", url="/orphan/"),
        MenuItem(id=8, parent=6, title="Grandchild", url="/a/second/deep/"),
    ]
    tree = build_menu_tree(items)

    assert [node.item.id for node in tree] == [1, 2]
    assert [child.id for child in tree[0].children] == [5, 6]
    assert tree[1].children == []


def test_menu_tree_is_cached():
    tree = get_menu_tree("test-menu", DEFAULT_APP_MENU)
    assert cache_get("nav", "test-menu") is tree
    assert get_menu_tree("test-menu", []) is tree


def test_dropdown_entries_sections():
    tree = build_menu_tree(DEFAULT_APP_MENU)
    prospector = next(node for node in tree if node.item.title == "Prospector")
    entries = dropdown_entries(prospector)

    kinds = [(e["kind"], e.get("text") or (e["item"].title if "item" in e else "")) for e in entries]
    assert kinds == [
        ("label", "Search By"),
        ("link", "Episodes by Person"),
        ("link", "Podcasts by Title"),
        ("divider", ""),
        ("label", "Advanced"),
        ("link", "Advanced Podcasts"),
        ("link", "Advanced Episodes"),
    ]


def test_dropdown_entries_unknown_parent_is_plain_links():
    node = build_menu_tree([
        MenuItem(id=1, title="Extras", url="/x/"),
        MenuItem(id=2, parent=1, title="One", url="/x/1/"),
    ])[0]
    assert [e["kind"] for e in dropdown_entries(node)] == ["link"]


def test_navigation_not_rendered_off_app_pages():
    tree = build_menu_tree(DEFAULT_APP_MENU)
    assert render_app_navigation(_viewer(), tree, "/pricing/") == ""
    assert render_app_navigation(None, tree, "/app/") == ""


def test_navigation_markup():
    tree = build_menu_tree(DEFAULT_APP_MENU)
    html = render_app_navigation(_viewer(), tree, "/app/pipeline/", onboarding_progress=40)

    config = json.loads(re.search(r"window\.guestifyAppNav = (.*?);\n", html).group(1))
    assert config["restUrl"] == rest_url()
    assert len(config["nonce"]) == 10

    assert 'data-progress="40"' in html
    assert "GH" in html
    assert "grace@example.com" in html
    assert 'id="mobileMenu"' in html
    assert "app-nav__dropdown-label" in html
    assert re.search(r'href="/app/pipeline/"\s+class="app-nav__link app-nav__link--active"', html)


def test_navigation_without_onboarding_progress():
    tree = build_menu_tree(DEFAULT_APP_MENU)
    html = render_app_navigation(_viewer(), tree, "/app/")
    assert "data-progress" not in html


def test_navigation_blanks_script_urls():
    tree = build_menu_tree([
        MenuItem(id=1, title="Bad", url="javascript:alert(1)"),
        MenuItem(id=2, parent=1, title="Worse", url="javascript:alert(2)"),
    ])
    viewer = _viewer().model_copy(update={"avatar_url": "javascript:alert(3)"})
    html = render_app_navigation(viewer, tree, "/app/")
    assert "javascript:" not in html
    assert "Worse" in html
