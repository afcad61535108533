"""
Account Settings - profile, billing, credits, team, integrations,
notifications and support panels behind a single sidebar page.
"""
from apps import AppManifest, discover_fragments
from apps.account.config import APP_ID, URL_PREFIX

APP_NAME = "Account Settings"


def get_manifest() -> AppManifest:
    return AppManifest(
        app_id=APP_ID,
        name=APP_NAME,
        description="Manage your profile, preferences, and subscription details.",
        icon="fa-solid fa-gear",
        url_prefix=URL_PREFIX,
        router_module="apps.account.router",
        fragments=discover_fragments("apps.account.panels"),
    )
