"""Named date windows relative to "now"."""

from __future__ import annotations

from enum import Enum

from fintrend.domain.reporting.exceptions import (
    UnknownPeriodError,
    UnknownQuickRangeError,
)


class QuickRange(str, Enum):
    """Quick filters offered next to list and chart views."""

    ALL = "all"
    WEEK = "week"  # trailing 7 days
    MONTH = "month"
    QUARTER = "quarter"
    HALF_YEAR = "half-year"

    @classmethod
    def parse(cls, value: str | QuickRange) -> QuickRange:
        if isinstance(value, QuickRange):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise UnknownQuickRangeError(value) from e


class CurrentPeriod(str, Enum):
    """Calendar period containing "now" (weeks run Monday to Sunday)."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEARLY = "half-yearly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: str | CurrentPeriod) -> CurrentPeriod:
        if isinstance(value, CurrentPeriod):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise UnknownPeriodError(value) from e
