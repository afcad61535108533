"""
User-related models.
"""
from typing import Optional
from pydantic import BaseModel

from .base import Snapshot


class Viewer(BaseModel):
    """Signed-in user, decoded from the session cookie."""
    id: int
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    avatar_url: Optional[str] = None

    @property
    def initials(self) -> str:
        initials = (self.first_name[:1] + self.last_name[:1]).upper()
        if not initials:
            initials = self.display_name[:1].upper()
        return initials

    @property
    def greeting_name(self) -> str:
        return self.first_name or self.display_name


class UserProfile(Snapshot):
    """Profile snapshot used by the general, support and team panels."""
    first_name: str = ""
    last_name: str = ""
    display_name: Optional[str] = None
    email: str = ""
    job_title: str = ""
    avatar_url: str = ""
    initials: str = "U"
