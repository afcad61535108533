"""
Process-local TTL caches.

Three named pools, each a cachetools.TTLCache guarded by one lock:

- usermeta  Supabase usermeta reads, including cached misses
- nav       built menu trees
- credits   balance and tier lookups from the credits service

Lookups in an unknown pool miss and writes to it are dropped.
"""
import threading
from typing import Any, Dict, Iterable, Optional

from cachetools import TTLCache

POOL_SIZES = {
    # name: (maxsize, ttl seconds)
    "usermeta": (1024, 60),
    "nav": (32, 300),
    "credits": (512, 30),
}

_lock = threading.Lock()
_pools: Dict[str, TTLCache] = {
    name: TTLCache(maxsize=maxsize, ttl=ttl) for name, (maxsize, ttl) in POOL_SIZES.items()
}


def cache_get(pool: str, key: str) -> Optional[Any]:
    """Cached value, or None when missing or expired."""
    cache = _pools.get(pool)
    if cache is None:
        return None
    with _lock:
        return cache.get(key)


def cache_set(pool: str, key: str, value: Any) -> None:
    cache = _pools.get(pool)
    if cache is not None:
        with _lock:
            cache[key] = value


def cache_delete(pool: str, key: str) -> None:
    cache = _pools.get(pool)
    if cache is not None:
        with _lock:
            cache.pop(key, None)


def cache_invalidate(pool: str) -> None:
    """Drop every entry in one pool."""
    cache = _pools.get(pool)
    if cache is not None:
        with _lock:
            cache.clear()


def cache_invalidate_multi(pools: Iterable[str]) -> None:
    for pool in pools:
        cache_invalidate(pool)
