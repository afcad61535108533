"""
Base model for stored snapshots.

Snapshots come from usermeta and the credits service, where a missing value
is often stored as null. A null counts as absent: the field falls back to its
default instead of failing validation for the whole snapshot.
"""
from typing import Any

from pydantic import BaseModel, model_validator


def drop_none(value: Any) -> Any:
    """Recursively remove None entries from dicts and lists."""
    if isinstance(value, dict):
        return {k: drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [drop_none(v) for v in value if v is not None]
    return value


class Snapshot(BaseModel):
    """Model whose null fields fall back to their defaults."""

    @model_validator(mode="before")
    @classmethod
    def _nulls_are_absent(cls, data: Any) -> Any:
        return drop_none(data)
