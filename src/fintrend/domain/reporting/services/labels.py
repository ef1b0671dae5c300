"""Map bucket labels back to the calendar span they cover.

Used for chart tooltips. Week labels are not mapped; any label that does not
match the granularity's pattern yields ``None`` ("no span to show").
"""

from __future__ import annotations

import re
from calendar import monthrange
from datetime import datetime, timezone

from fintrend.domain.reporting.value_objects import DateRange, Granularity
from fintrend.domain.shared.time import END_OF_DAY, to_utc

_MONTH_PATTERN = re.compile(r"^(\d{4})[-/. ]?(\d{1,2})$")
_QUARTER_PATTERN = re.compile(
    r"^(?:(\d{4})[- ]?Q([1-4])|Q([1-4])[- ]?(\d{4}))$",
    re.IGNORECASE,
)
_HALF_YEAR_PATTERN = re.compile(
    r"^(?:(\d{4})[- ]?H([12])|H([12])[- ]?(\d{4}))$",
    re.IGNORECASE,
)

SPAN_SEPARATOR = " – "


def _span(year: int, first_month: int, months: int) -> DateRange:
    last_month = first_month + months - 1
    last_day = monthrange(year, last_month)[1]
    start = datetime(year, first_month, 1, tzinfo=timezone.utc)
    end = datetime.combine(
        start.replace(month=last_month, day=last_day).date(),
        END_OF_DAY,
        tzinfo=timezone.utc,
    )
    return DateRange(start=start, end=end)


def _year_and_index(match: re.Match[str]) -> tuple[int, int]:
    """Pick year and ordinal out of either the ``YYYY-Xn`` or ``Xn-YYYY`` form."""
    year = match.group(1) or match.group(4)
    index = match.group(2) or match.group(3)
    return int(year), int(index)


def range_for_label(label: str, granularity: Granularity | str) -> DateRange | None:
    """Return the UTC span of a bucket label, or ``None`` if there is none."""
    granularity = Granularity.parse(granularity)
    if not label:
        return None
    text = label.strip()

    if granularity is Granularity.MONTHLY:
        match = _MONTH_PATTERN.match(text)
        if not match:
            return None
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            return None
        return _span(year, month, granularity.months_per_bucket)

    if granularity is Granularity.QUARTERLY:
        match = _QUARTER_PATTERN.match(text)
        if not match:
            return None
        year, quarter = _year_and_index(match)
        return _span(year, (quarter - 1) * 3 + 1, granularity.months_per_bucket)

    if granularity is Granularity.HALF_YEARLY:
        match = _HALF_YEAR_PATTERN.match(text)
        if not match:
            return None
        year, half = _year_and_index(match)
        return _span(year, 1 if half == 1 else 7, granularity.months_per_bucket)

    return None


def format_span(date_range: DateRange) -> str:
    """Render a range as ``DD.MM.YYYY – DD.MM.YYYY`` using UTC dates."""
    if date_range.start is None or date_range.end is None:
        return ""
    start = to_utc(date_range.start)
    end = to_utc(date_range.end)
    return f"{start:%d.%m.%Y}{SPAN_SEPARATOR}{end:%d.%m.%Y}"


def tooltip_label(label: str, granularity: Granularity | str) -> str:
    """Label with its span appended when one is known."""
    date_range = range_for_label(label, granularity)
    if date_range is None:
        return label
    return f"{label} ({format_span(date_range)})"
