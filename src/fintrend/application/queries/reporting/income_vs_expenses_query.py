"""Fetch income vs expenses over time via the overview read port."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from fintrend.application.dtos.reporting import (
    ChartSelection,
    IncomeExpensePoint,
    IncomeExpenseTotals,
    IncomeVsExpensesResult,
)
from fintrend.domain.reporting import BucketAmount, aggregate_by_bucket, reconcile
from fintrend.domain.shared.time import utc_now

if TYPE_CHECKING:
    from fintrend.application.factories import ReportingPortFactory
    from fintrend.application.ports.reporting import OverviewReadPort


class IncomeVsExpensesQuery:
    """Return per-bucket income, expenses and net with plotted totals."""

    def __init__(
        self,
        overview_read_port: OverviewReadPort,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._overview = overview_read_port
        self._clock = clock

    @classmethod
    def from_factory(cls, factory: ReportingPortFactory) -> IncomeVsExpensesQuery:
        return cls(overview_read_port=factory.overview_read_port())

    async def execute(self, selection: ChartSelection) -> IncomeVsExpensesResult:
        window = selection.resolve_window(self._clock())
        rows = await self._overview.overview(
            window=window,
            granularity=selection.granularity,
            category=selection.category,
        )

        reconciled = reconcile(
            [BucketAmount(label=row.label, amount=row.income) for row in rows],
            [BucketAmount(label=row.label, amount=row.expenses) for row in rows],
            selection.granularity,
        )
        net_by_label = aggregate_by_bucket(
            [BucketAmount(label=row.label, amount=row.net) for row in rows],
            selection.granularity,
        )
        points = [
            IncomeExpensePoint(
                label=point.label,
                income=point.budget,
                expenses=point.expenses,
                net=net_by_label[point.label],
            )
            for point in reconciled.series
        ]

        return IncomeVsExpensesResult(
            granularity=selection.granularity,
            window=window,
            points=points,
            totals=IncomeExpenseTotals(
                income=reconciled.totals.budget,
                expenses=reconciled.totals.expenses,
                net=sum((p.net for p in points), Decimal("0")),
            ),
            category=selection.category,
        )
