"""
Team membership and invitation models.
"""
from typing import Optional
from .base import Snapshot


class TeamMember(Snapshot):
    """Workspace member."""
    id: int
    name: str = ""
    email: str = ""
    role: str = "Member"  # 'Owner', 'Admin', 'Member'
    avatar_url: Optional[str] = None
    initials: str = "U"


class Invitation(Snapshot):
    """Invitation that has not been accepted yet."""
    id: str
    email: str = ""
    date: str = ""
