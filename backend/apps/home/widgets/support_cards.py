"""
Support Cards widget - weekly workshop and help banners.
"""
from core.rendering import home_url, render_template

from apps import FragmentManifest
from apps.home.services import HomeContext

SUPPORT_CARDS = [
    {
        "variant": "workshop",
        "icon": "fa-graduation-cap",
        "title": "Weekly Live Workshop",
        "text": 'Join us every Tuesday at 2PM EST for "Mastering the Perfect Pitch".',
        "path": "/workshop/",
        "link_text": "Register for free",
    },
    {
        "variant": "help",
        "icon": "fa-headset",
        "title": "Need Help?",
        "text": "Our team is here to help you get your first booking. Book a 1:1 onboarding call.",
        "path": "/contact/",
        "link_text": "Contact Support",
    },
]


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="support-cards",
        label="Community & Support",
        icon="fa-solid fa-circle-question",
        order=50,
        render_path="apps.home.widgets.support_cards:render",
    )


def render_support_cards() -> str:
    cards = [{**card, "url": home_url(card["path"])} for card in SUPPORT_CARDS]
    return render_template("home/support-cards.html", cards=cards)


async def render(ctx: HomeContext) -> str:
    return render_support_cards()
