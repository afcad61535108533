"""
Core Pydantic models shared across all apps.
"""
from .base import Snapshot, drop_none
from .user import Viewer, UserProfile
from .billing import (
    PaymentMethod,
    InvoiceRow,
    BillingData,
    UsageMeter,
    ActivityCounts,
    UsageData,
    CreditBalance,
    TierInfo,
)
from .team import TeamMember, Invitation
from .dashboard import (
    QuickStats,
    AuthorityScore,
    PillarStatus,
    ActivityItem,
    Outcomes,
    PipelineData,
    AttributionLink,
    RevenueSummary,
    ShowRevenue,
    AttributionData,
    DashboardData,
)
from .navigation import MenuItem, MenuNode

__all__ = [
    # Base
    "Snapshot", "drop_none",
    # User
    "Viewer", "UserProfile",
    # Billing
    "PaymentMethod", "InvoiceRow", "BillingData", "UsageMeter", "ActivityCounts",
    "UsageData", "CreditBalance", "TierInfo",
    # Team
    "TeamMember", "Invitation",
    # Dashboard
    "QuickStats", "AuthorityScore", "PillarStatus", "ActivityItem", "Outcomes",
    "PipelineData", "AttributionLink", "RevenueSummary", "ShowRevenue", "AttributionData", "DashboardData",
    # Navigation
    "MenuItem", "MenuNode",
]
