"""The user's current chart selection."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator

from fintrend.domain.reporting import (
    CurrentPeriod,
    DateRange,
    Granularity,
    QuickRange,
    RecordFilters,
    current_period_range,
    resolve_range,
)

if TYPE_CHECKING:
    from fintrend_config import Settings


class ChartSelection(BaseModel):
    """Granularity, window and category a chart is rendered for.

    The window comes from the first of ``custom_range``, ``quick_range`` and
    ``period`` that is set; with none of them the window is unbounded.
    """

    granularity: Granularity = Granularity.MONTHLY
    quick_range: QuickRange | None = None
    custom_range: DateRange | None = None
    period: CurrentPeriod | None = None
    category: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("granularity", mode="before")
    @classmethod
    def _parse_granularity(cls, v: Any) -> Granularity:
        return Granularity.parse(v)

    @field_validator("category", mode="before")
    @classmethod
    def _blank_category_is_none(cls, v: Any) -> str | None:
        return RecordFilters(category=v).category

    @classmethod
    def from_settings(cls, settings: Settings) -> ChartSelection:
        """Initial selection: configured granularity over the grouped window."""
        return cls(
            granularity=settings.default_granularity,
            period=settings.grouped_window,
        )

    def resolve_window(self, now: datetime) -> DateRange:
        if self.custom_range is not None:
            return self.custom_range
        if self.quick_range is not None:
            return resolve_range(self.quick_range, now)
        if self.period is not None:
            return current_period_range(self.period, now)
        return DateRange.unbounded()

    @property
    def filters(self) -> RecordFilters:
        return RecordFilters(category=self.category)
