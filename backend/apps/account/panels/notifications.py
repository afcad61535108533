"""
Notifications panel - email and in-app notification toggles.

Toggles post back through the account script; this panel only reflects the
stored preferences.
"""
from typing import Any, Dict

from core.rendering import render_template

from apps import FragmentManifest
from apps.account.config import NOTIFICATION_PREFS_META_KEY
from apps.account.services import AccountContext

DEFAULT_NOTIFICATION_PREFS = {
    "booking_requests": True,
    "message_replies": True,
    "weekly_digest": False,
    "product_updates": True,
    "marketing_emails": False,
    "desktop_notifications": True,
    "sound_alerts": False,
}

NOTIFICATION_GROUPS = [
    {
        "title": "Email Notifications",
        "desc": "Choose what updates you receive by email.",
        "settings": [
            ("booking_requests", "New booking requests", "Get notified when someone wants to book you as a guest."),
            ("message_replies", "Message replies", "Receive emails when hosts reply to your outreach."),
            ("weekly_digest", "Weekly digest", "Summary of your podcast prospecting activity."),
            ("product_updates", "Product updates", "News about new features and improvements."),
            ("marketing_emails", "Marketing emails", "Tips, case studies, and promotional content."),
        ],
    },
    {
        "title": "In-App Notifications",
        "desc": "Control notifications within the Guestify app.",
        "settings": [
            ("desktop_notifications", "Desktop notifications", "Show browser notifications for important updates."),
            ("sound_alerts", "Sound alerts", "Play a sound when you receive new notifications."),
        ],
    },
]


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="notifications",
        label="Notifications",
        icon="fa-solid fa-bell",
        order=60,
        render_path="apps.account.panels.notifications:render",
    )


def merge_notification_prefs(stored: Any) -> Dict[str, Any]:
    """Stored preferences over the defaults; anything but a mapping means defaults."""
    if not isinstance(stored, dict):
        return dict(DEFAULT_NOTIFICATION_PREFS)
    return {**DEFAULT_NOTIFICATION_PREFS, **stored}


def render_notifications_panel(prefs: Dict[str, Any]) -> str:
    groups = [
        {
            "title": group["title"],
            "desc": group["desc"],
            "rows": [
                {"setting": key, "label": label, "desc": desc, "checked": bool(prefs.get(key))}
                for key, label, desc in group["settings"]
            ],
        }
        for group in NOTIFICATION_GROUPS
    ]
    return render_template("account/panel-notifications.html", groups=groups)


async def render(ctx: AccountContext) -> str:
    stored = ctx.store.get(ctx.viewer.id, NOTIFICATION_PREFS_META_KEY)
    return render_notifications_panel(merge_notification_prefs(stored))
