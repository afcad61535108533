"""
Billing models - plan snapshot, usage meters, invoices, credit balance.
"""
from typing import Optional, List
from .base import Snapshot


class PaymentMethod(Snapshot):
    """Card on file."""
    brand: Optional[str] = None
    last4: Optional[str] = None


class InvoiceRow(Snapshot):
    """Invoice history row, already formatted by the billing service."""
    date: str = ""
    amount: str = ""
    status: str = ""
    pdf_url: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class BillingData(Snapshot):
    """Subscription snapshot for the billing panel."""
    membership_name: str = "Free Plan"
    subscription_date: str = ""
    renewal_date: str = ""
    search_cap: int = 50
    payment_method: Optional[PaymentMethod] = None
    invoices: List[InvoiceRow] = []
    manage_url: Optional[str] = None  # Membership account page, set only for paid members


class UsageMeter(Snapshot):
    """Used / total pair. A missing total is resolved per meter."""
    used: int = 0
    total: Optional[int] = None


class ActivityCounts(Snapshot):
    ai_generations: int = 0
    podcast_searches: int = 0
    emails_sent: int = 0


class UsageData(Snapshot):
    """Usage snapshot for the current period."""
    ai_credits: UsageMeter = UsageMeter()
    prospector: UsageMeter = UsageMeter()
    outreach: UsageMeter = UsageMeter()
    activity: ActivityCounts = ActivityCounts()
    resets_date: Optional[str] = None


class CreditBalance(Snapshot):
    """Authority credit balance for the current billing cycle."""
    monthly_allowance: int = 0
    allowance: int = 0
    rollover: int = 0
    overage: int = 0
    total: Optional[int] = None  # None = allowance + rollover + overage
    hard_cap: int = 0
    billing_cycle_end: str = ""
    billing_period: str = "monthly"


class TierInfo(Snapshot):
    """Resolved subscription tier."""
    tier: str = ""
