"""
Jinja2 environment shared by every fragment.

Templates live in backend/templates/. Autoescaping is on, so values are
escaped on output; helpers that return markup wrap it in Markup.
"""
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit, parse_qsl

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from config import settings
from core.auth import create_nonce

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def home_url(path: str = "/") -> str:
    """Absolute URL on the site, e.g. home_url('/pricing/')."""
    if not path.startswith("/"):
        path = "/" + path
    return settings.site_url.rstrip("/") + path


def rest_url(path: str = "") -> str:
    return home_url("/wp-json/" + settings.rest_namespace + path)


def login_url(redirect_to: Optional[str] = None) -> str:
    url = home_url(settings.login_path)
    if redirect_to:
        url = add_query_arg("redirect_to", redirect_to, url)
    return url


def add_query_arg(key: str, value: Any, url: str) -> str:
    """Set a single query parameter on a URL, replacing any previous value."""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != key]
    query.append((key, str(value)))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


SAFE_URL_SCHEMES = ("http", "https", "mailto")


def safe_url(url: Any) -> str:
    """
    URL for an href/src attribute: relative URLs and http(s)/mailto only,
    '' for anything else (javascript:, data:, ...). Control characters are
    removed first since browsers ignore them inside a scheme.
    """
    if not url:
        return ""
    cleaned = "".join(ch for ch in str(url).strip() if ch >= " " and ch != "\x7f")
    try:
        scheme = urlsplit(cleaned).scheme
    except ValueError:
        return ""
    if scheme and scheme.lower() not in SAFE_URL_SCHEMES:
        return ""
    return cleaned


def nonce_field(action: str, name: str, user_id: int) -> Markup:
    """Hidden nonce input for a form handled by the CMS."""
    nonce = create_nonce(action, user_id)
    return Markup(
        f'<input type="hidden" id="{escape(name)}" name="{escape(name)}" value="{escape(nonce)}">'
    )


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["safe_url"] = safe_url
    env.globals.update(
        home_url=home_url,
        rest_url=rest_url,
        login_url=login_url,
        add_query_arg=add_query_arg,
        nonce_field=nonce_field,
        assets_url=settings.theme_assets_url.rstrip("/"),
    )
    return env


environment = _build_environment()


def render_template(name: str, **context: Any) -> str:
    return environment.get_template(name).render(**context)
