"""
Integrations panel - third-party connections and the personal API key.
"""
import secrets
import string
from typing import List

from pydantic import BaseModel

from core.rendering import render_template
from core.usermeta import UserMetaStore

from apps import FragmentManifest
from apps.account.config import API_KEY_META_KEY
from apps.account.services import AccountContext

API_KEY_PREFIX = "sk_live_"
API_KEY_LENGTH = 32
_API_KEY_ALPHABET = string.ascii_letters + string.digits


class Integration(BaseModel):
    id: str
    name: str
    description: str = ""
    icon: str = ""
    color: str = ""
    connected: bool = False


INTEGRATIONS = [
    Integration(
        id="hubspot",
        name="HubSpot",
        description="Sync contacts and deals automatically.",
        icon="fa-solid fa-h",
        color="#FF7A59",
    ),
    Integration(
        id="slack",
        name="Slack",
        description="Get notified of new bookings and messages.",
        icon="fa-brands fa-slack",
        color="#4A154B",
    ),
    Integration(
        id="spotify",
        name="Spotify for Podcasters",
        description="Import your podcast analytics.",
        icon="fa-brands fa-spotify",
        color="#1DB954",
    ),
    Integration(
        id="linkedin",
        name="LinkedIn",
        description="Share bookings to your professional network.",
        icon="fa-brands fa-linkedin",
        color="#0077B5",
    ),
]


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="integrations",
        label="Integrations",
        icon="fa-solid fa-plug",
        order=50,
        render_path="apps.account.panels.integrations:render",
    )


def token_meta_key(integration_id: str) -> str:
    return f"guestify_{integration_id}_token"


def load_integrations(store: UserMetaStore, user_id: int) -> List[Integration]:
    """Fixed integration list with `connected` set from the stored tokens."""
    return [
        integration.model_copy(update={"connected": bool(store.get(user_id, token_meta_key(integration.id)))})
        for integration in INTEGRATIONS
    ]


def generate_api_key() -> str:
    return API_KEY_PREFIX + "".join(secrets.choice(_API_KEY_ALPHABET) for _ in range(API_KEY_LENGTH))


def get_or_create_api_key(store: UserMetaStore, user_id: int) -> str:
    """Stored API key; a new one is generated and saved on first access."""
    api_key = store.get(user_id, API_KEY_META_KEY)
    if api_key:
        return api_key

    api_key = generate_api_key()
    store.set(user_id, API_KEY_META_KEY, api_key)
    print(f"[Account] Generated API key for user {user_id}")
    return api_key


def mask_api_key(api_key: str) -> str:
    """'sk_live_ab' + 20 asterisks + last four characters."""
    return api_key[:10] + "*" * 20 + api_key[-4:]


def render_integrations_panel(integrations: List[Integration], api_key: str) -> str:
    return render_template(
        "account/panel-integrations.html",
        integrations=integrations,
        api_key=api_key,
        api_key_masked=mask_api_key(api_key),
    )


async def render(ctx: AccountContext) -> str:
    return render_integrations_panel(
        load_integrations(ctx.store, ctx.viewer.id),
        get_or_create_api_key(ctx.store, ctx.viewer.id),
    )
