"""Timestamp to bucket-key conversion.

Keys are built from UTC calendar fields so the same instant always lands in
the same bucket regardless of the caller's local timezone. Naive timestamps
are read as UTC.
"""

from __future__ import annotations

from datetime import date, datetime

from fintrend.domain.reporting.value_objects import Granularity
from fintrend.domain.shared.time import to_utc


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def quarter_key(year: int, month: int) -> str:
    return f"{year:04d}-Q{(month - 1) // 3 + 1}"


def half_year_key(year: int, month: int) -> str:
    return f"{year:04d}-H{1 if month <= 6 else 2}"


def week_key(day: date) -> str:
    """ISO week key; the week belongs to the year holding its Thursday.

    ``isocalendar()`` implements the Thursday rule, so 2024-12-30 is
    ``2025-W01`` and 2021-01-03 is ``2020-W53``.
    """
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def bucket_key(timestamp: datetime, granularity: Granularity | str) -> str:
    """Return the bucket key of ``timestamp`` for ``granularity``."""
    granularity = Granularity.parse(granularity)
    moment = to_utc(timestamp)

    if granularity is Granularity.MONTHLY:
        return month_key(moment.year, moment.month)
    if granularity is Granularity.QUARTERLY:
        return quarter_key(moment.year, moment.month)
    if granularity is Granularity.HALF_YEARLY:
        return half_year_key(moment.year, moment.month)
    return week_key(moment.date())
