from datetime import date, datetime, timedelta, timezone

from core.formatting import (
    end_of_month,
    format_audience,
    format_currency,
    format_stat_number,
    long_date,
    number_format,
    parse_datetime,
    relative_time,
    round_half_up,
    round_int,
    short_date,
    ucfirst,
    weekday_date,
)


def test_rounding_is_half_away_from_zero():
    assert round_int(2.5) == 3
    assert round_int(-2.5) == -3
    assert round_half_up(0.05, 1) == 0.1
    assert round_half_up(49.0088, 1) == 49.0


def test_number_format():
    assert number_format(12345) == "12,345"
    assert number_format(None) == "0"
    assert number_format(1.25, 1) == "1.3"


def test_stat_numbers():
    assert format_stat_number(950) == "950"
    assert format_stat_number(1500) == "1.5K"
    assert format_stat_number(2_500_000, is_currency=True) == "$2.5M"


def test_currency_and_audience():
    assert format_currency(800) == "$800"
    assert format_currency(1200) == "$1.2k"
    assert format_audience(12_400) == "12K"
    assert format_audience(1_200_000) == "1.2M"
    assert format_audience(500) == "500"


def test_dates():
    day = date(2026, 10, 19)
    assert short_date(day) == "Oct 19"
    assert long_date(day) == "Oct 19, 2026"
    assert weekday_date(day) == "Monday, October 19"
    assert end_of_month(day) == date(2026, 10, 31)
    assert end_of_month(date(2028, 2, 3)) == date(2028, 2, 29)


def test_parse_datetime():
    assert parse_datetime("2026-11-30") == datetime(2026, 11, 30, tzinfo=timezone.utc)
    assert parse_datetime("2026-11-30T10:00:00Z").tzinfo is not None
    assert parse_datetime("") is None
    assert parse_datetime("soon") is None


def test_ucfirst():
    assert ucfirst("pending") == "Pending"
    assert ucfirst("") == ""


def test_relative_time():
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def ago(**kwargs):
        return (now - timedelta(**kwargs)).isoformat()

    assert relative_time(ago(seconds=30), now) == "Just now"
    assert relative_time(ago(minutes=1), now) == "1 min ago"
    assert relative_time(ago(minutes=5), now) == "5 mins ago"
    assert relative_time(ago(hours=3), now) == "3 hours ago"
    assert relative_time(ago(hours=30), now) == "Yesterday"
    assert relative_time(ago(days=4), now) == "4 days ago"
    assert relative_time("not a timestamp", now) == ""
