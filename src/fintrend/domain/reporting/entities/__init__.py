"""Reporting entities."""

from fintrend.domain.reporting.entities.records import BucketAmount, RawRecord
from fintrend.domain.reporting.entities.series import (
    ReconciledSeries,
    SeriesPoint,
    Totals,
)

__all__ = [
    "BucketAmount",
    "RawRecord",
    "ReconciledSeries",
    "SeriesPoint",
    "Totals",
]
