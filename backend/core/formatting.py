"""
Display formatting helpers shared by panels and widgets.

Rounding is half away from zero (the billing service and the client script
both round that way), not Python's banker's rounding.
"""
import calendar
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float]


def round_half_up(value: Number, digits: int = 0) -> float:
    """Round half away from zero."""
    exponent = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_int(value: Number) -> int:
    return int(round_half_up(value))


def number_format(value: Number, decimals: int = 0) -> str:
    """Thousands-separated number, e.g. 12345 -> '12,345'."""
    value = round_half_up(value or 0, decimals)
    if decimals == 0:
        return f"{int(value):,}"
    return f"{value:,.{decimals}f}"


def ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


def format_stat_number(num: Number, is_currency: bool = False) -> str:
    """Large numbers with K/M suffix: 1500 -> '1.5K', 2500000 -> '$2.5M'."""
    prefix = "$" if is_currency else ""
    if num >= 1_000_000:
        return prefix + number_format(num / 1_000_000, 1) + "M"
    if num >= 1000:
        return prefix + number_format(num / 1000, 1) + "K"
    return prefix + number_format(num)


def format_currency(amount: Number) -> str:
    """Outcome card currency: 1200 -> '$1.2k'."""
    if amount >= 1000:
        return "$" + number_format(amount / 1000, 1) + "k"
    return "$" + number_format(amount)


def format_audience(num: Number) -> str:
    """Audience reach: 1200000 -> '1.2M', 12400 -> '12K'."""
    if num >= 1_000_000:
        return number_format(num / 1_000_000, 1) + "M"
    if num >= 1000:
        return number_format(num / 1000, 0) + "K"
    return number_format(num)


def short_date(value: date) -> str:
    """'Oct 31'"""
    return f"{value:%b} {value.day}"


def long_date(value: date) -> str:
    """'Oct 31, 2026'"""
    return f"{value:%b} {value.day}, {value.year}"


def weekday_date(value: date) -> str:
    """'Monday, October 19'"""
    return f"{value:%A, %B} {value.day}"


def end_of_month(today: Optional[date] = None) -> date:
    today = today or date.today()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=last_day)


def parse_datetime(value: str) -> Optional[datetime]:
    """Parse an ISO date or datetime string; None when unparseable."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def relative_time(timestamp: str, now: Optional[datetime] = None) -> str:
    """Human relative time for activity feeds ('5 mins ago', 'Yesterday')."""
    then = parse_datetime(timestamp)
    if then is None:
        return ""
    now = now or datetime.now(timezone.utc)
    diff = int((now - then).total_seconds())

    if diff < 60:
        return "Just now"
    if diff < 3600:
        return _plural(diff // 60, "min")
    if diff < 86400:
        return _plural(diff // 3600, "hour")
    if diff < 172800:
        return "Yesterday"
    return _plural(diff // 86400, "day")
