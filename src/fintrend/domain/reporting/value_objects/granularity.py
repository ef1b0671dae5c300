"""Bucket widths for time-series charts."""

from __future__ import annotations

from enum import Enum

from fintrend.domain.reporting.exceptions import UnknownGranularityError


class Granularity(str, Enum):
    """Width of one chart bucket."""

    WEEKLY = "weekly"  # 2025-W07
    MONTHLY = "monthly"  # 2025-02
    QUARTERLY = "quarterly"  # 2025-Q1
    HALF_YEARLY = "half-yearly"  # 2025-H1

    @classmethod
    def parse(cls, value: str | Granularity) -> Granularity:
        """Parse a user-supplied granularity name (case-insensitive)."""
        if isinstance(value, Granularity):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError as e:
            raise UnknownGranularityError(value) from e

    @property
    def months_per_bucket(self) -> int | None:
        """Calendar months covered by one bucket, ``None`` for weeks."""
        return _MONTHS_PER_BUCKET[self]


_MONTHS_PER_BUCKET: dict[Granularity, int | None] = {
    Granularity.WEEKLY: None,
    Granularity.MONTHLY: 1,
    Granularity.QUARTERLY: 3,
    Granularity.HALF_YEARLY: 6,
}
