"""
Supabase database client.
"""
from functools import lru_cache
from typing import Optional
from supabase import create_client, Client
from config import settings


def supabase_configured() -> bool:
    return bool(settings.supabase_url and settings.supabase_service_key)


@lru_cache()
def get_supabase_admin() -> Optional[Client]:
    """Get Supabase client with service key (bypasses RLS). None when unconfigured."""
    if not supabase_configured():
        return None
    return create_client(settings.supabase_url, settings.supabase_service_key)
