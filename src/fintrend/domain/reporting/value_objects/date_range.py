"""Date window value object."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from fintrend.domain.reporting.exceptions import InvalidDateRangeError


class DateRange(BaseModel):
    """Closed date window; ``end`` is an inclusive end-of-day timestamp.

    Both boundaries are ``None`` for the unbounded ("all") window.
    """

    start: datetime | None = None
    end: datetime | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> DateRange:
        if self.start is not None and self.end is not None and self.start > self.end:
            msg = "DateRange start must be on or before end"
            raise ValueError(msg)
        return self

    @classmethod
    def unbounded(cls) -> DateRange:
        return cls()

    @classmethod
    def custom(cls, start: datetime, end: datetime) -> DateRange:
        """Build a caller-supplied range, rejecting ``start > end``."""
        if start > end:
            raise InvalidDateRangeError(start, end)
        return cls(start=start, end=end)

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, moment: datetime) -> bool:
        if self.start is not None and moment < self.start:
            return False
        if self.end is not None and moment > self.end:
            return False
        return True
