"""Domain services for the reporting domain."""

from fintrend.domain.reporting.services.bucketing import bucket_key, week_key
from fintrend.domain.reporting.services.labels import (
    format_span,
    range_for_label,
    tooltip_label,
)
from fintrend.domain.reporting.services.ranges import (
    current_period_range,
    resolve_range,
)
from fintrend.domain.reporting.services.reconciliation import (
    SeriesSource,
    aggregate_by_bucket,
    reconcile,
)

__all__ = [
    "SeriesSource",
    "aggregate_by_bucket",
    "bucket_key",
    "current_period_range",
    "format_span",
    "range_for_label",
    "reconcile",
    "resolve_range",
    "tooltip_label",
    "week_key",
]
