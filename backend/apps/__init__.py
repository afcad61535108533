"""
Page apps - auto-discovery and manifest system.

Each app in backend/apps/<name>/ exposes a get_manifest() function that
returns an AppManifest. An app is a page shell (account settings, app home)
made of fragments: panels or widgets that each live in their own module and
describe themselves with a FragmentManifest.

discover_apps() scans for apps; discover_fragments() scans an app's fragment
package. Both are used by main.py and the app routers.
"""
import importlib
import pkgutil
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class FragmentManifest:
    """Describes a single panel or widget within an app."""
    fragment_id: str                       # e.g. 'billing', 'authority-score'
    label: str                             # e.g. 'Billing & Plan'
    icon: str = ""                         # Font Awesome class, e.g. 'fa-solid fa-credit-card'
    order: int = 100                       # Sidebar / page position, lowest first
    render_path: str = ""                  # 'module:function' taking the app's render context


@dataclass
class AppManifest:
    """Describes a single page app."""
    app_id: str                            # e.g. 'account'
    name: str                              # e.g. 'Account Settings'
    description: str = ""
    icon: str = ""
    url_prefix: str = ""                   # Mount point, e.g. '/account'
    router_module: Optional[str] = None    # Dotted path to module with `router` attribute
    fragments: List[FragmentManifest] = field(default_factory=list)


def discover_apps() -> List[AppManifest]:
    """
    Scan backend/apps/ for app packages and collect their manifests.

    Each app package must have a get_manifest() function in its __init__.py.
    Packages starting with '_' are skipped.
    """
    manifests = []

    import apps

    for importer, modname, ispkg in pkgutil.iter_modules(apps.__path__):
        if not ispkg or modname.startswith("_"):
            continue

        try:
            mod = importlib.import_module(f"apps.{modname}")
            if hasattr(mod, "get_manifest"):
                manifest = mod.get_manifest()
                manifests.append(manifest)
                print(f"[Apps] Discovered: {manifest.name} ({manifest.app_id})")
            else:
                print(f"[Apps] Warning: apps.{modname} has no get_manifest()")
        except Exception as e:
            print(f"[Apps] Error loading apps.{modname}: {e}")

    return manifests


def discover_fragments(package: str) -> List[FragmentManifest]:
    """
    Collect get_fragment_manifest() from every module of a fragment package
    (e.g. 'apps.account.panels'), sorted by order.
    """
    manifests = []
    pkg = importlib.import_module(package)

    for importer, modname, ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith("_"):
            continue

        try:
            mod = importlib.import_module(f"{package}.{modname}")
            if hasattr(mod, "get_fragment_manifest"):
                manifests.append(mod.get_fragment_manifest())
        except Exception as e:
            print(f"[Apps] Error loading fragment {package}.{modname}: {e}")

    return sorted(manifests, key=lambda m: (m.order, m.fragment_id))


def load_render(manifest: FragmentManifest) -> Callable:
    """Resolve a fragment's 'module:function' render path."""
    module_path, func_name = manifest.render_path.split(":", 1)
    mod = importlib.import_module(module_path)
    return getattr(mod, func_name)
