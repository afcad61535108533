"""
Application configuration from environment variables.
"""
from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings

# .env is in the project root (parent of backend/)
ENV_FILE = Path(__file__).parent.parent / ".env"


class Settings(BaseSettings):
    # Site
    site_url: str = "http://localhost:8000"  # home_url() base
    login_path: str = "/login/"
    form_handler_url: str = "http://localhost:8000/wp-admin/admin-post.php"  # Generic POST handler
    rest_namespace: str = "guestify/v1/"
    theme_assets_url: str = "/static"

    # Session & nonces (identity is issued by the CMS, we only verify it)
    session_secret: str = "change-me"
    session_cookie: str = "gfy_session"
    nonce_lifetime: int = 86400  # seconds, a nonce is accepted for 12-24h

    # Credits service (optional, panel degrades to zeros when unset)
    credits_api_url: str = ""
    credits_api_key: str = ""

    # Supabase (optional, in-memory user meta when unset)
    supabase_url: str = ""
    supabase_key: str = ""  # anon key for client
    supabase_service_key: str = ""  # service key for admin ops

    # App settings
    default_goal: str = "grow_revenue"
    debug: bool = True

    class Config:
        env_file = str(ENV_FILE)
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
