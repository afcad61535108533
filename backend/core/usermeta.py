"""
Per-user key/value metadata (tokens, preferences, cached snapshots).

Two backends:
- InMemoryUserMetaStore: process-local dict, used in development and tests
- SupabaseUserMetaStore: `usermeta` table (user_id, meta_key, meta_value jsonb)

get_user_meta_store() picks Supabase when it is configured.
"""
import threading
from functools import lru_cache
from typing import Any, Dict, Optional, Protocol, Tuple

from core.cache import cache_get, cache_set, cache_delete
from core.database import get_supabase_admin


class UserMetaStore(Protocol):
    def get(self, user_id: int, key: str, default: Any = None) -> Any: ...

    def set(self, user_id: int, key: str, value: Any) -> None: ...

    def delete(self, user_id: int, key: str) -> None: ...


class InMemoryUserMetaStore:
    """Dict-backed store."""

    def __init__(self, initial: Optional[Dict[Tuple[int, str], Any]] = None):
        self._data: Dict[Tuple[int, str], Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, user_id: int, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get((user_id, key), default)

    def set(self, user_id: int, key: str, value: Any) -> None:
        with self._lock:
            self._data[(user_id, key)] = value

    def delete(self, user_id: int, key: str) -> None:
        with self._lock:
            self._data.pop((user_id, key), None)


_MISSING = object()


class SupabaseUserMetaStore:
    """Supabase-backed store with reads memoised in the `usermeta` cache pool."""

    TABLE = "usermeta"

    def __init__(self, client):
        self.client = client

    @staticmethod
    def _cache_key(user_id: int, key: str) -> str:
        return f"{user_id}:{key}"

    def get(self, user_id: int, key: str, default: Any = None) -> Any:
        cache_key = self._cache_key(user_id, key)
        cached = cache_get("usermeta", cache_key)
        if cached is not None:
            return default if cached is _MISSING else cached

        result = self.client.table(self.TABLE).select("meta_value").eq(
            "user_id", user_id
        ).eq("meta_key", key).execute()

        if not result.data:
            cache_set("usermeta", cache_key, _MISSING)
            return default

        value = result.data[0]["meta_value"]
        cache_set("usermeta", cache_key, value)
        return value

    def set(self, user_id: int, key: str, value: Any) -> None:
        self.client.table(self.TABLE).upsert({
            "user_id": user_id,
            "meta_key": key,
            "meta_value": value,
        }, on_conflict="user_id,meta_key").execute()
        cache_delete("usermeta", self._cache_key(user_id, key))

    def delete(self, user_id: int, key: str) -> None:
        self.client.table(self.TABLE).delete().eq(
            "user_id", user_id
        ).eq("meta_key", key).execute()
        cache_delete("usermeta", self._cache_key(user_id, key))


@lru_cache()
def get_user_meta_store() -> UserMetaStore:
    """Supabase store when configured, else a process-local in-memory store."""
    client = get_supabase_admin()
    if client is None:
        print("[UserMeta] Supabase not configured, using in-memory store")
        return InMemoryUserMetaStore()
    return SupabaseUserMetaStore(client)
