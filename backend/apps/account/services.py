"""
Account Settings - shared panel helpers.

Panels read snapshots that other services keep in usermeta. Everything here
tolerates missing or malformed snapshots and falls back to model defaults.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from core.credits import CreditRepository, NullCreditRepository, NullTierResolver, TierResolver
from core.models import BillingData, UsageData, UserProfile, Viewer, drop_none
from core.usermeta import UserMetaStore

from apps.account.config import (
    BILLING_META_KEY,
    DEFAULT_PANEL,
    PROFILE_META_KEY,
    USAGE_META_KEY,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class AccountContext:
    """Everything a panel may need to render for one viewer."""
    viewer: Viewer
    store: UserMetaStore
    credit_repository: CreditRepository = field(default_factory=NullCreditRepository)
    tier_resolver: TierResolver = field(default_factory=NullTierResolver)


def resolve_panel(panel: Optional[str], valid_panels: List[str]) -> str:
    """Requested panel when known, else the general panel."""
    panel = (panel or "").strip().lower()
    return panel if panel in valid_panels else DEFAULT_PANEL


def load_model(store: UserMetaStore, user_id: int, key: str, model: Type[ModelT]) -> ModelT:
    """Parse a usermeta snapshot into `model`; defaults when absent or invalid."""
    raw = store.get(user_id, key)
    if not isinstance(raw, dict):
        return model()
    try:
        return model(**raw)
    except ValidationError as e:
        print(f"[Account] Ignoring invalid {key} for user {user_id}: {e.error_count()} errors")
        return model()


def load_model_list(store: UserMetaStore, user_id: int, key: str, model: Type[ModelT]) -> List[ModelT]:
    """Parse a list snapshot, skipping rows that do not validate."""
    raw = store.get(user_id, key)
    if not isinstance(raw, list):
        return []
    rows = []
    for row in raw:
        if not isinstance(row, dict):
            continue
        try:
            rows.append(model(**row))
        except ValidationError:
            print(f"[Account] Skipping invalid {key} row for user {user_id}")
    return rows


def load_user_data(viewer: Viewer, store: UserMetaStore) -> UserProfile:
    """Profile snapshot, with blanks filled from the session identity."""
    stored: Any = store.get(viewer.id, PROFILE_META_KEY)
    data = drop_none(stored) if isinstance(stored, dict) else {}

    data.setdefault("first_name", viewer.first_name)
    data.setdefault("last_name", viewer.last_name)
    data.setdefault("display_name", viewer.display_name)
    data.setdefault("email", viewer.email)
    if viewer.avatar_url:
        data.setdefault("avatar_url", viewer.avatar_url)
    if viewer.initials:
        data.setdefault("initials", viewer.initials)

    try:
        return UserProfile(**data)
    except ValidationError:
        print(f"[Account] Ignoring invalid {PROFILE_META_KEY} for user {viewer.id}")
        return UserProfile(
            first_name=viewer.first_name,
            last_name=viewer.last_name,
            display_name=viewer.display_name,
            email=viewer.email,
        )


def load_billing_data(store: UserMetaStore, user_id: int) -> BillingData:
    return load_model(store, user_id, BILLING_META_KEY, BillingData)


def load_usage_data(store: UserMetaStore, user_id: int) -> UsageData:
    return load_model(store, user_id, USAGE_META_KEY, UsageData)
