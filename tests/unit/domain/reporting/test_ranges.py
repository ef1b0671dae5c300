"""Unit tests for quick-range and current-period resolution."""

from datetime import datetime, timedelta, timezone

import pytest

from fintrend.domain.reporting import (
    CurrentPeriod,
    DateRange,
    QuickRange,
    current_period_range,
    resolve_range,
)
from fintrend.domain.reporting.exceptions import (
    UnknownPeriodError,
    UnknownQuickRangeError,
)

NOW = datetime(2025, 5, 10, 14, 30, tzinfo=timezone.utc)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def end_of(year: int, month: int, day: int) -> datetime:
    return utc(year, month, day, 23, 59, 59, 999000)


class TestResolveRange:
    def test_all_is_unbounded(self):
        window = resolve_range(QuickRange.ALL, NOW)

        assert window.start is None
        assert window.end is None
        assert window.is_unbounded

    def test_week_is_trailing_seven_days(self):
        window = resolve_range("week", NOW)

        assert window.start == utc(2025, 5, 4)
        assert window.end == end_of(2025, 5, 10)

    def test_month(self):
        window = resolve_range(QuickRange.MONTH, NOW)

        assert window.start == utc(2025, 5, 1)
        assert window.end == end_of(2025, 5, 31)

    def test_quarter(self):
        window = resolve_range("quarter", NOW)

        assert window.start == utc(2025, 4, 1)
        assert window.end == end_of(2025, 6, 30)

    def test_half_year(self):
        window = resolve_range("half-year", utc(2025, 9, 3))

        assert window.start == utc(2025, 7, 1)
        assert window.end == end_of(2025, 12, 31)

    def test_february_in_leap_year(self):
        window = resolve_range("month", utc(2024, 2, 10))

        assert window.end == end_of(2024, 2, 29)

    def test_keeps_timezone_of_now(self):
        berlin = timezone(timedelta(hours=2))
        now = datetime(2025, 5, 10, 9, 0, tzinfo=berlin)

        window = resolve_range("month", now)

        assert window.start == datetime(2025, 5, 1, tzinfo=berlin)
        assert window.start.tzinfo is berlin

    @pytest.mark.parametrize("name", ["month", "quarter", "half-year", "week"])
    def test_window_contains_now(self, name):
        assert resolve_range(name, NOW).contains(NOW)

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownQuickRangeError):
            resolve_range("fortnight", NOW)


class TestCurrentPeriodRange:
    def test_weekly_runs_monday_to_sunday(self):
        # 2025-05-10 is a Saturday
        window = current_period_range(CurrentPeriod.WEEKLY, NOW)

        assert window.start == utc(2025, 5, 5)
        assert window.end == end_of(2025, 5, 11)

    def test_weekly_on_a_monday(self):
        window = current_period_range("weekly", utc(2025, 5, 5, 8))

        assert window.start == utc(2025, 5, 5)

    def test_yearly(self):
        window = current_period_range("yearly", NOW)

        assert window.start == utc(2025, 1, 1)
        assert window.end == end_of(2025, 12, 31)

    def test_quarterly_matches_quick_range(self):
        assert current_period_range("quarterly", NOW) == resolve_range("quarter", NOW)

    def test_unknown_period_raises(self):
        with pytest.raises(UnknownPeriodError):
            current_period_range("daily", NOW)


class TestDateRange:
    def test_custom_rejects_reversed_bounds(self):
        from fintrend.domain.reporting.exceptions import InvalidDateRangeError

        with pytest.raises(InvalidDateRangeError):
            DateRange.custom(utc(2025, 2, 1), utc(2025, 1, 1))

    def test_custom_allows_single_instant(self):
        moment = utc(2025, 2, 1)
        window = DateRange.custom(moment, moment)

        assert window.contains(moment)

    def test_contains_respects_inclusive_end(self):
        window = resolve_range("month", NOW)

        assert window.contains(end_of(2025, 5, 31))
        assert not window.contains(utc(2025, 6, 1))
