"""Resolve named windows ("this quarter", "last 7 days") into date ranges.

All boundaries keep the timezone of ``now``; callers that want UTC windows
pass a UTC ``now``.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import datetime, timedelta

from fintrend.domain.reporting.value_objects import (
    CurrentPeriod,
    DateRange,
    QuickRange,
)
from fintrend.domain.shared.time import end_of_day, start_of_day

_TRAILING_WEEK_DAYS = 7


def _month_block(now: datetime, first_month: int, months: int) -> DateRange:
    """Range covering ``months`` calendar months starting at ``first_month``."""
    last_month = first_month + months - 1
    last_day = monthrange(now.year, last_month)[1]
    start = start_of_day(now.replace(month=first_month, day=1))
    end = end_of_day(now.replace(month=last_month, day=last_day))
    return DateRange(start=start, end=end)


def _month_of(now: datetime) -> DateRange:
    return _month_block(now, now.month, 1)


def _quarter_of(now: datetime) -> DateRange:
    return _month_block(now, (now.month - 1) // 3 * 3 + 1, 3)


def _half_year_of(now: datetime) -> DateRange:
    return _month_block(now, 1 if now.month <= 6 else 7, 6)


def resolve_range(name: QuickRange | str, now: datetime) -> DateRange:
    """Resolve a quick range relative to ``now``.

    ``week`` is the trailing seven days ending today; the other names are
    calendar blocks containing ``now``. ``all`` is unbounded.
    """
    quick_range = QuickRange.parse(name)

    if quick_range is QuickRange.ALL:
        return DateRange.unbounded()
    if quick_range is QuickRange.WEEK:
        start = start_of_day(now - timedelta(days=_TRAILING_WEEK_DAYS - 1))
        return DateRange(start=start, end=end_of_day(now))
    if quick_range is QuickRange.MONTH:
        return _month_of(now)
    if quick_range is QuickRange.QUARTER:
        return _quarter_of(now)
    return _half_year_of(now)


def current_period_range(period: CurrentPeriod | str, now: datetime) -> DateRange:
    """Calendar period containing ``now``; weeks run Monday to Sunday."""
    current = CurrentPeriod.parse(period)

    if current is CurrentPeriod.WEEKLY:
        monday = start_of_day(now - timedelta(days=now.weekday()))
        return DateRange(start=monday, end=end_of_day(monday + timedelta(days=6)))
    if current is CurrentPeriod.MONTHLY:
        return _month_of(now)
    if current is CurrentPeriod.QUARTERLY:
        return _quarter_of(now)
    if current is CurrentPeriod.HALF_YEARLY:
        return _half_year_of(now)
    return _month_block(now, 1, 12)
