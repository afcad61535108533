"""
Guestify - App Views

Entry point for the FastAPI backend. Auto-discovers page apps from
backend/apps/ and registers their routers under each app's URL prefix.

URL scheme:
  /account/?panel=<id>                Account settings page
  /account/panels/{panel}             Account panel fragment
  /app/                               App home dashboard
  /app/widgets/{widget}               Home widget fragment
  /partials/auth-modal?redirect=<uri>  Login/register modal for anonymous visitors
  /static/*                           Theme assets
"""
import importlib
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from config import settings
from apps import discover_apps
from core.auth import get_viewer
from core.auth_modal import render_auth_modal
from core.models import Viewer

_registered_apps = []


def _register_apps(app: FastAPI):
    """Discover apps and register their routers."""
    manifests = discover_apps()

    for manifest in manifests:
        if manifest.router_module:
            try:
                mod = importlib.import_module(manifest.router_module)
                app.include_router(
                    mod.router,
                    prefix=manifest.url_prefix,
                    tags=[manifest.name]
                )
                print(f"[Router] {manifest.name}: {manifest.url_prefix}/*")
            except Exception as e:
                print(f"[Router] Error loading {manifest.router_module}: {e}")
                continue

        for fragment in manifest.fragments:
            print(f"[Router]   {fragment.label}: {manifest.url_prefix} ({fragment.fragment_id})")

        _registered_apps.append(manifest)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    print(f"[Startup] {len(_registered_apps)} apps registered, site {settings.site_url}")
    yield
    print("[Shutdown] Stopped")


app = FastAPI(
    title="Guestify App Views",
    description="Server-rendered account settings and app home for Guestify",
    version="1.1.0",
    lifespan=lifespan
)


# ─────────────────────────────────────────────────────────────────────────────
# ROUTE REGISTRATION
# ─────────────────────────────────────────────────────────────────────────────

_register_apps(app)


# ─────────────────────────────────────────────────────────────────────────────
# STATIC FILES
# ─────────────────────────────────────────────────────────────────────────────

static_path = Path(__file__).parent.parent / "static"
if static_path.exists():
    app.mount("/static", StaticFiles(directory=str(static_path)), name="static")


# ─────────────────────────────────────────────────────────────────────────────
# SHARED PARTIALS
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/partials/auth-modal", response_class=HTMLResponse)
async def auth_modal_partial(
    redirect: Optional[str] = Query(None),
    viewer: Optional[Viewer] = Depends(get_viewer),
):
    """Auth modal for pages served outside these apps. Empty when signed in."""
    # Only same-site paths; anything else falls back to /app/.
    if redirect and not (redirect.startswith("/") and not redirect.startswith("//")):
        redirect = None
    return render_auth_modal(viewer, redirect)


# ─────────────────────────────────────────────────────────────────────────────
# HEALTH CHECK & ROOT
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "debug": settings.debug}


@app.get("/")
async def root():
    """Root endpoint with app info."""
    return {
        "name": "Guestify App Views",
        "version": "1.1.0",
        "docs": "/docs",
        "apps": {
            manifest.app_id: {
                "name": manifest.name,
                "url": f"{manifest.url_prefix}/",
                "fragments": [fragment.fragment_id for fragment in manifest.fragments],
            }
            for manifest in _registered_apps
        },
    }
