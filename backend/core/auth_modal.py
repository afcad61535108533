"""
Login modal for anonymous visitors.

Authentication itself happens in the identity layer; this only renders the
entry points. Social buttons come from an injected provider when one is
installed, otherwise from the built-in provider links.
"""
from typing import Optional, Protocol
from urllib.parse import quote

from markupsafe import Markup

from core.models.user import Viewer
from core.rendering import home_url, render_template

SOCIAL_PROVIDERS = [
    {"id": "facebook", "label": "Continue with Facebook", "icon": "fa-brands fa-facebook-f"},
    {"id": "google", "label": "Continue with Google", "icon": None},
    {"id": "linkedin", "label": "Continue with LinkedIn", "icon": "fa-brands fa-linkedin-in"},
]


class SocialLoginProvider(Protocol):
    def render_buttons(self, redirect_url: str) -> Optional[str]: ...


def social_login_url(provider: str, redirect_url: str) -> str:
    return home_url(f"/wp-login.php?loginSocial={provider}&redirect={quote(redirect_url, safe='')}")


def render_auth_modal(
    viewer: Optional[Viewer],
    request_uri: Optional[str] = None,
    social_login: Optional[SocialLoginProvider] = None,
) -> str:
    """Modal markup for anonymous visitors, '' for signed-in viewers."""
    if viewer is not None:
        return ""

    redirect_url = home_url(request_uri) if request_uri else home_url("/app/")

    provider_markup = None
    if social_login is not None:
        buttons = social_login.render_buttons(redirect_url)
        if buttons:
            provider_markup = Markup(buttons)

    providers = [
        {**provider, "url": social_login_url(provider["id"], redirect_url)}
        for provider in SOCIAL_PROVIDERS
    ]

    return render_template(
        "auth-modal.html",
        redirect_url=redirect_url,
        provider_markup=provider_markup,
        providers=providers,
        login_link=home_url(f"/login/?redirect_to={quote(redirect_url, safe='')}"),
    )
