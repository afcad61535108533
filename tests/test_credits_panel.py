import asyncio

from core.models import CreditBalance, TierInfo
from apps.account.panels.credits import (
    GAUGE_AMBER,
    GAUGE_GREEN,
    GAUGE_RED,
    MESSAGE_ALLOWANCE_USED,
    MESSAGE_LIMIT_REACHED,
    MESSAGE_RUNNING_LOW,
    build_credits_context,
    gauge_color,
    load_credit_snapshot,
    render_credits_panel,
    resolve_tier,
)

from conftest import FakeCreditRepository, FakeTierResolver


def test_gauge_color_thresholds():
    assert gauge_color(100) == GAUGE_RED
    assert gauge_color(85) == GAUGE_AMBER
    assert gauge_color(80) == GAUGE_AMBER
    assert gauge_color(79) == GAUGE_GREEN
    assert gauge_color(50) == GAUGE_GREEN


def test_zero_allowance_is_zero_percent():
    ctx = build_credits_context(CreditBalance(monthly_allowance=0, allowance=0))
    assert ctx["used"] == 0
    assert ctx["percent_used"] == 0
    assert ctx["gauge_color"] == GAUGE_GREEN
    assert not ctx["show_upgrade"]


def test_no_balance_renders_zeroed():
    ctx = build_credits_context(None, None)
    assert ctx["total"] == 0
    assert ctx["tier_name"] == ""
    assert ctx["refill_date"] == ""


def test_percent_used_and_gauge_math():
    ctx = build_credits_context({"monthly_allowance": 1000, "allowance": 150})
    assert ctx["used"] == 850
    assert ctx["percent_used"] == 85
    assert ctx["gauge_color"] == GAUGE_AMBER
    assert ctx["circumference"] == 326.7
    assert ctx["dash_offset"] == 49.0
    assert ctx["upgrade_level"] == "warning"
    assert ctx["upgrade_message"] == MESSAGE_RUNNING_LOW


def test_percent_used_is_capped_at_100():
    ctx = build_credits_context(CreditBalance(monthly_allowance=100, allowance=-50))
    assert ctx["percent_used"] == 100
    assert ctx["dash_offset"] == 0.0
    assert ctx["upgrade_level"] == "danger"


def test_total_defaults_to_sum_of_buckets():
    ctx = build_credits_context(CreditBalance(monthly_allowance=500, allowance=200, rollover=50, overage=25))
    assert ctx["total"] == 275


def test_explicit_total_wins():
    ctx = build_credits_context(CreditBalance(monthly_allowance=500, allowance=200, total=999))
    assert ctx["total"] == 999


def test_upgrade_messages():
    used_up = build_credits_context(CreditBalance(monthly_allowance=500, allowance=0))
    assert used_up["upgrade_message"] == MESSAGE_ALLOWANCE_USED

    capped = build_credits_context(CreditBalance(monthly_allowance=500, allowance=0, hard_cap=600))
    assert capped["upgrade_message"] == MESSAGE_LIMIT_REACHED


def test_tier_resolution():
    assert resolve_tier({"tier": "velocity"}) == ("velocity", "Velocity")
    assert resolve_tier(TierInfo(tier="zenith")) == ("zenith", "Zenith")
    assert resolve_tier("enterprise") == ("enterprise", "Enterprise")
    assert resolve_tier(None) == ("", "")


def test_refill_date_formatting():
    ctx = build_credits_context(CreditBalance(billing_cycle_end="2026-11-30 23:59:59"))
    assert ctx["refill_date"] == "Nov 30, 2026"

    ctx = build_credits_context(CreditBalance(billing_cycle_end="not a date"))
    assert ctx["refill_date"] == ""


def test_render_hides_empty_buckets_and_keeps_placeholders():
    html = render_credits_panel(CreditBalance(monthly_allowance=500, allowance=400), {"tier": "accelerator"})

    assert 'id="row-rollover" style="display:none;"' in html
    assert 'id="row-overage" style="display:none;"' in html
    assert 'id="credit-upgrade-prompt" style="display:none;"' in html
    assert "gfy-badge--tier-accelerator" in html
    assert "Accelerator" in html
    for element_id in ("credit-gauge", "gauge-arc", "credit-usage-stats", "credit-actions-list",
                       "credit-transactions-list", "credit-packs-grid"):
        assert f'id="{element_id}"' in html


def test_render_low_balance_shows_prompt():
    html = render_credits_panel(CreditBalance(monthly_allowance=1000, allowance=100, rollover=20))
    assert 'id="row-rollover" style=""' in html
    assert 'data-level="warning"' in html
    assert GAUGE_AMBER in html
    assert 'stroke-dasharray="326.7"' in html


def test_load_snapshot_with_collaborators():
    repo = FakeCreditRepository(balance={"monthly_allowance": 500, "allowance": 100})
    resolver = FakeTierResolver(tier={"tier": "free"})
    balance, tier = asyncio.run(load_credit_snapshot(7, repo, resolver))
    assert balance == {"monthly_allowance": 500, "allowance": 100}
    assert tier == {"tier": "free"}


def test_load_snapshot_tolerates_missing_or_failing_collaborators():
    assert asyncio.run(load_credit_snapshot(7, None, None)) == (None, None)

    repo = FakeCreditRepository(error=RuntimeError("credits service down"))
    balance, tier = asyncio.run(load_credit_snapshot(7, repo, FakeTierResolver()))
    assert balance is None
    assert tier is None
