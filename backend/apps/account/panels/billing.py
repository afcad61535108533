"""
Billing & Plan panel - subscription, credit meters, monthly activity, invoices.
"""
from datetime import date
from typing import Optional

from core.formatting import end_of_month, number_format, round_int, short_date, ucfirst
from core.models import BillingData, UsageData, UsageMeter
from core.rendering import render_template

from apps import FragmentManifest
from apps.account.services import AccountContext, load_billing_data, load_usage_data

DEFAULT_AI_CREDITS_TOTAL = 500
DEFAULT_OUTREACH_TOTAL = 300


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="billing",
        label="Billing & Plan",
        icon="fa-solid fa-credit-card",
        order=20,
        render_path="apps.account.panels.billing:render",
    )


def build_meter(meter: UsageMeter, default_total: int) -> dict:
    """
    Remaining/percent for one meter. percent is the share still available,
    rounded half away from zero, 0 when the total is 0. It is not clamped;
    bar_width is the same value limited to 0..100 for the progress bar.
    """
    total = meter.total if meter.total is not None else default_total
    used = meter.used
    remaining = total - used
    percent = round_int(remaining / total * 100) if total > 0 else 0
    return {
        "used": used,
        "total": total,
        "remaining": remaining,
        "percent": percent,
        "bar_width": max(0, min(100, percent)),
    }


def build_billing_context(
    billing: Optional[BillingData] = None,
    usage: Optional[UsageData] = None,
    today: Optional[date] = None,
) -> dict:
    billing = billing or BillingData()
    usage = usage or UsageData()

    invoices = [
        {
            "date": invoice.date,
            "amount": invoice.amount,
            "is_paid": invoice.status == "paid",
            "status_label": "Paid" if invoice.status == "paid" else ucfirst(invoice.status),
            "pdf_url": invoice.pdf_url,
        }
        for invoice in billing.invoices
    ]

    payment_method = None
    if billing.payment_method is not None:
        brand = billing.payment_method.brand
        payment_method = {
            "brand_label": brand or "Card",
            "brand_class": (brand or "visa").lower(),
            "last4": billing.payment_method.last4 or "****",
        }

    return {
        "membership_name": billing.membership_name,
        "subscription_date": billing.subscription_date,
        "renewal_date": billing.renewal_date,
        "search_cap": number_format(billing.search_cap),
        "manage_url": billing.manage_url,
        "payment_method": payment_method,
        "ai_credits": build_meter(usage.ai_credits, DEFAULT_AI_CREDITS_TOTAL),
        "prospector": build_meter(usage.prospector, billing.search_cap),
        "outreach": build_meter(usage.outreach, DEFAULT_OUTREACH_TOTAL),
        "activity": usage.activity,
        "resets_date": usage.resets_date or short_date(end_of_month(today)),
        "invoices": invoices,
    }


def render_billing_panel(
    billing: Optional[BillingData] = None,
    usage: Optional[UsageData] = None,
    today: Optional[date] = None,
) -> str:
    return render_template("account/panel-billing.html", **build_billing_context(billing, usage, today))


async def render(ctx: AccountContext) -> str:
    return render_billing_panel(
        load_billing_data(ctx.store, ctx.viewer.id),
        load_usage_data(ctx.store, ctx.viewer.id),
    )
