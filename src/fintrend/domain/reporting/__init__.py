"""Reporting domain layer exports."""

# Value Objects
from fintrend.domain.reporting.value_objects import (
    CurrentPeriod,
    DateRange,
    Granularity,
    QuickRange,
    RecordFilters,
)

# Entities
from fintrend.domain.reporting.entities import (
    BucketAmount,
    RawRecord,
    ReconciledSeries,
    SeriesPoint,
    Totals,
)

# Domain Services
from fintrend.domain.reporting.services import (
    aggregate_by_bucket,
    bucket_key,
    current_period_range,
    format_span,
    range_for_label,
    reconcile,
    resolve_range,
    tooltip_label,
)

__all__ = [
    # Value Objects
    "CurrentPeriod",
    "DateRange",
    "Granularity",
    "QuickRange",
    "RecordFilters",
    # Entities
    "BucketAmount",
    "RawRecord",
    "ReconciledSeries",
    "SeriesPoint",
    "Totals",
    # Services
    "aggregate_by_bucket",
    "bucket_key",
    "current_period_range",
    "format_span",
    "range_for_label",
    "reconcile",
    "resolve_range",
    "tooltip_label",
]
