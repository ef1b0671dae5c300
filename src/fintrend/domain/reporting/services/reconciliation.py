"""Merge two per-bucket sources into one comparison series."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal
from typing import Union

from fintrend.domain.reporting.entities import (
    BucketAmount,
    RawRecord,
    ReconciledSeries,
    SeriesPoint,
    Totals,
)
from fintrend.domain.reporting.services.bucketing import bucket_key
from fintrend.domain.reporting.value_objects import Granularity

logger = logging.getLogger(__name__)

SeriesSource = Iterable[Union[RawRecord, BucketAmount]]


def aggregate_by_bucket(
    source: SeriesSource,
    granularity: Granularity | str,
) -> dict[str, Decimal]:
    """Sum a source per bucket key.

    Raw records are bucketed by their timestamp; pre-bucketed amounts keep the
    server's label. Repeated labels are summed and blank labels skipped.
    """
    granularity = Granularity.parse(granularity)
    sums: dict[str, Decimal] = defaultdict(Decimal)

    for item in source:
        if isinstance(item, RawRecord):
            sums[bucket_key(item.occurred_at, granularity)] += item.amount
        elif item.label:
            sums[item.label] += item.amount

    return dict(sums)


def reconcile(
    budget_source: SeriesSource,
    expense_source: SeriesSource,
    granularity: Granularity | str,
) -> ReconciledSeries:
    """Union both sources' buckets into one series sorted by label.

    A bucket present on only one side still appears, with the other side at
    zero. Totals are summed from the emitted points.
    """
    budget_by_bucket = aggregate_by_bucket(budget_source, granularity)
    expenses_by_bucket = aggregate_by_bucket(expense_source, granularity)

    labels = sorted(set(budget_by_bucket) | set(expenses_by_bucket))
    series = [
        SeriesPoint(
            label=label,
            budget=budget_by_bucket.get(label, Decimal("0")),
            expenses=expenses_by_bucket.get(label, Decimal("0")),
        )
        for label in labels
    ]

    logger.debug(
        "Reconciled %d budget and %d expense buckets into %d points",
        len(budget_by_bucket),
        len(expenses_by_bucket),
        len(series),
    )
    return ReconciledSeries(series=series, totals=Totals.of(series))
