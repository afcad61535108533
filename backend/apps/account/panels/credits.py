"""
Credits & Usage panel - Authority Credits gauge and balance breakdown.

Only the balance card is rendered server-side. Usage stats, action costs,
transactions and credit packs are placeholders filled by the account script
from the credits REST API.
"""
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import ValidationError

from core.credits import CreditRepository, TierResolver
from core.formatting import long_date, number_format, parse_datetime, round_half_up, round_int, ucfirst
from core.models import CreditBalance, TierInfo
from core.rendering import render_template

from apps import FragmentManifest
from apps.account.services import AccountContext

GAUGE_GREEN = "#10b981"
GAUGE_AMBER = "#f59e0b"
GAUGE_RED = "#ef4444"

GAUGE_RADIUS = 52
GAUGE_CIRCUMFERENCE = 2 * 3.14159 * GAUGE_RADIUS

WARNING_PERCENT = 80

TIER_NAMES = {
    "accelerator": "Accelerator",
    "velocity": "Velocity",
    "zenith": "Zenith",
    "free": "Free",
}

MESSAGE_LIMIT_REACHED = "You have reached your credit limit for this billing cycle."
MESSAGE_ALLOWANCE_USED = "Your monthly allowance is used up. Purchase additional credits or upgrade your plan."
MESSAGE_RUNNING_LOW = "You're running low on credits. Consider upgrading your plan."

BalanceInput = Union[CreditBalance, Dict[str, Any], None]
TierInput = Union[TierInfo, Dict[str, Any], str, None]


def get_fragment_manifest() -> FragmentManifest:
    return FragmentManifest(
        fragment_id="credits",
        label="Credits & Usage",
        icon="fa-solid fa-coins",
        order=30,
        render_path="apps.account.panels.credits:render",
    )


def gauge_color(percent_used: int) -> str:
    if percent_used >= 100:
        return GAUGE_RED
    if percent_used >= WARNING_PERCENT:
        return GAUGE_AMBER
    return GAUGE_GREEN


def _coerce_balance(balance: BalanceInput) -> CreditBalance:
    if isinstance(balance, CreditBalance):
        return balance
    if isinstance(balance, dict):
        try:
            return CreditBalance(**balance)
        except ValidationError:
            print("[Credits] Ignoring malformed balance payload")
    return CreditBalance()


def resolve_tier(tier: TierInput) -> Tuple[str, str]:
    """(tier key, display name); both empty when no tier is known."""
    if not tier:
        return "", ""
    if isinstance(tier, TierInfo):
        tier_key = tier.tier
    elif isinstance(tier, dict):
        tier_key = str(tier.get("tier") or "")
    else:
        tier_key = str(tier)
    return tier_key, TIER_NAMES.get(tier_key, ucfirst(tier_key))


def upgrade_message(percent_used: int, total: int, hard_cap: int) -> str:
    if total <= 0 and hard_cap > 0:
        return MESSAGE_LIMIT_REACHED
    if percent_used >= 100:
        return MESSAGE_ALLOWANCE_USED
    if percent_used >= WARNING_PERCENT:
        return MESSAGE_RUNNING_LOW
    return ""


def build_credits_context(balance: BalanceInput = None, tier: TierInput = None) -> dict:
    balance = _coerce_balance(balance)

    monthly_allowance = balance.monthly_allowance
    allowance = balance.allowance
    total = balance.total
    if total is None:
        total = allowance + balance.rollover + balance.overage

    used = monthly_allowance - allowance if monthly_allowance > 0 else 0
    percent_used = min(100, round_int(used / monthly_allowance * 100)) if monthly_allowance > 0 else 0

    dash_offset = GAUGE_CIRCUMFERENCE - (GAUGE_CIRCUMFERENCE * min(percent_used, 100) / 100)

    tier_key, tier_name = resolve_tier(tier)

    refill_date = ""
    cycle_end = parse_datetime(balance.billing_cycle_end)
    if cycle_end is not None:
        refill_date = long_date(cycle_end)

    if percent_used >= 100:
        level = "danger"
    elif percent_used >= WARNING_PERCENT:
        level = "warning"
    else:
        level = ""

    return {
        "monthly_allowance": monthly_allowance,
        "allowance": allowance,
        "rollover": balance.rollover,
        "overage": balance.overage,
        "total": total,
        "used": used,
        "percent_used": percent_used,
        "gauge_color": gauge_color(percent_used),
        "radius": GAUGE_RADIUS,
        "circumference": round_half_up(GAUGE_CIRCUMFERENCE, 1),
        "dash_offset": round_half_up(dash_offset, 1),
        "tier_key": tier_key,
        "tier_name": tier_name,
        "refill_date": refill_date,
        "billing_period": ucfirst(balance.billing_period),
        "show_upgrade": percent_used >= WARNING_PERCENT,
        "upgrade_level": level,
        "upgrade_message": upgrade_message(percent_used, total, balance.hard_cap),
        "fmt": number_format,
    }


async def load_credit_snapshot(
    user_id: int,
    repository: Optional[CreditRepository],
    resolver: Optional[TierResolver],
) -> Tuple[Optional[Dict[str, Any]], TierInput]:
    """
    Initial balance and tier for the gauge. Either is None when its
    collaborator is absent or failed; the panel then renders zeroed.
    """
    balance = None
    tier = None

    if repository is not None:
        try:
            balance = await repository.get_balance(user_id) or None
        except Exception as e:
            print(f"[Credits] Balance lookup failed for user {user_id}: {e}")

    if resolver is not None:
        try:
            tier = await resolver.get_user_tier(user_id) or None
        except Exception as e:
            print(f"[Credits] Tier lookup failed for user {user_id}: {e}")

    return balance, tier


def render_credits_panel(balance: BalanceInput = None, tier: TierInput = None) -> str:
    return render_template("account/panel-credits.html", **build_credits_context(balance, tier))


async def render(ctx: AccountContext) -> str:
    balance, tier = await load_credit_snapshot(ctx.viewer.id, ctx.credit_repository, ctx.tier_resolver)
    return render_credits_panel(balance, tier)
