"""
App Home - dashboard snapshot loading.

The home dashboard service writes a DashboardData snapshot to usermeta; the
goal selector writes the current goal separately.
"""
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from config import settings
from core.models import DashboardData, Viewer
from core.usermeta import UserMetaStore

from apps.home.config import DASHBOARD_META_KEY, GOAL_META_KEY


@dataclass
class HomeContext:
    viewer: Viewer
    store: UserMetaStore
    dashboard: DashboardData


def get_current_goal(store: UserMetaStore, user_id: int) -> str:
    return store.get(user_id, GOAL_META_KEY) or settings.default_goal


def load_dashboard_data(store: UserMetaStore, user_id: int) -> DashboardData:
    """Snapshot for the widgets, with current_goal taken from the goal preference."""
    raw = store.get(user_id, DASHBOARD_META_KEY)
    data: Optional[DashboardData] = None
    if isinstance(raw, dict):
        try:
            data = DashboardData(**raw)
        except ValidationError as e:
            print(f"[Home] Ignoring invalid dashboard snapshot for user {user_id}: {e.error_count()} errors")
    if data is None:
        data = DashboardData()

    data.current_goal = get_current_goal(store, user_id)
    return data


def build_home_context(viewer: Viewer, store: UserMetaStore) -> HomeContext:
    return HomeContext(viewer=viewer, store=store, dashboard=load_dashboard_data(store, viewer.id))
