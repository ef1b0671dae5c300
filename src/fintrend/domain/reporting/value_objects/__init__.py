"""Reporting value objects."""

from fintrend.domain.reporting.value_objects.date_range import DateRange
from fintrend.domain.reporting.value_objects.granularity import Granularity
from fintrend.domain.reporting.value_objects.quick_range import (
    CurrentPeriod,
    QuickRange,
)
from fintrend.domain.reporting.value_objects.record_filters import RecordFilters

__all__ = [
    "CurrentPeriod",
    "DateRange",
    "Granularity",
    "QuickRange",
    "RecordFilters",
]
