"""
Home dashboard models - stats, authority score, pillars, recent activity,
outcomes, pipeline and revenue attribution.
"""
from typing import Optional, List, Dict, Union
from .base import Snapshot


class QuickStats(Snapshot):
    pitches: int = 0
    interviews: int = 0
    episodes: int = 0
    revenue: float = 0


class AuthorityScore(Snapshot):
    """Composite 0-100 score with five weighted sub-dimensions."""
    overall_score: Optional[float] = None
    trend: str = "stable"  # 'up', 'down', 'stable'
    breakdown: Dict[str, float] = {}


class PillarStatus(Snapshot):
    """Live status line for one pillar card."""
    status_text: Optional[str] = None
    is_alert: bool = False
    show_dot: bool = False
    icon: str = ""


class ActivityItem(Snapshot):
    type: str = "default"
    icon: str = "fa-solid fa-file"
    title: str = "Untitled"
    subtitle: str = ""
    url: str = "#"
    id: Optional[Union[int, str]] = None
    timestamp: str = ""  # ISO time, shown as relative time when set


class Outcomes(Snapshot):
    revenue: float = 0
    revenue_change: str = ""
    audience: int = 0
    partners: int = 0


class PipelineData(Snapshot):
    """Counts for the five delivery steps; a rate is shown only when set."""
    shows_found: int = 0
    shows_researched: int = 0
    pitches_sent: int = 0
    interviews_booked: int = 0
    episodes_aired: int = 0
    vetted_rate: Optional[Union[int, float]] = None
    pitched_rate: Optional[Union[int, float]] = None
    booked_rate: Optional[Union[int, float]] = None
    aired_rate: Optional[Union[int, float]] = None


class AttributionLink(Snapshot):
    """Tracked link row."""
    name: str = ""
    link: str = ""
    clicks: int = 0
    leads: int = 0
    revenue: float = 0


class RevenueSummary(Snapshot):
    total_actual: float = 0
    total_pipeline: float = 0
    total_commission: float = 0
    roi_percentage: float = 0


class ShowRevenue(Snapshot):
    podcast_title: str = "Unknown"
    appearance_count: int = 0
    total_estimated: float = 0
    total_actual: float = 0


class AttributionData(Snapshot):
    links: List[AttributionLink] = []
    revenue_summary: Optional[RevenueSummary] = None
    revenue_by_show: List[ShowRevenue] = []


class DashboardData(Snapshot):
    """Snapshot assembled by the home dashboard service."""
    stats: QuickStats = QuickStats()
    authority: Optional[AuthorityScore] = None
    pillars: Dict[str, PillarStatus] = {}
    recent_activity: List[ActivityItem] = []
    outcomes: Outcomes = Outcomes()
    pipeline: PipelineData = PipelineData()
    attribution: AttributionData = AttributionData()
    tasks_due: int = 0
    current_goal: str = "grow_revenue"
