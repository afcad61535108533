"""
App Home - dashboard landing page with stats, workspace pillars,
recent activity and support cards.
"""
from apps import AppManifest, discover_fragments
from apps.home.config import APP_ID, URL_PREFIX

APP_NAME = "App Home"


def get_manifest() -> AppManifest:
    return AppManifest(
        app_id=APP_ID,
        name=APP_NAME,
        description="Goal-driven dashboard for podcast guest outreach.",
        icon="fa-solid fa-gauge-high",
        url_prefix=URL_PREFIX,
        router_module="apps.home.router",
        fragments=discover_fragments("apps.home.widgets"),
    )
