"""Budget vs expenses over time.

Expenses come pre-bucketed from the overview endpoint; budgets are drained
page by page and bucketed here by creation time. Both sources are fetched
concurrently and reconciled only once both are complete; when one of them
fails the other is cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from fintrend.application.dtos.reporting import (
    BudgetVsExpensesResult,
    ChartSelection,
)
from fintrend.application.services.paginated_drain_service import (
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    PaginatedDrainService,
)
from fintrend.domain.reporting import BucketAmount, reconcile
from fintrend.domain.shared.time import utc_now

if TYPE_CHECKING:
    from fintrend.application.factories import ReportingPortFactory
    from fintrend.application.ports.reporting import (
        OverviewReadPort,
        RecordPagePort,
    )

logger = logging.getLogger(__name__)


class BudgetVsExpensesQuery:
    """Reconcile budgets against expenses for one chart selection."""

    def __init__(
        self,
        overview_read_port: OverviewReadPort,
        budget_record_port: RecordPagePort,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._overview = overview_read_port
        self._budget_drain = PaginatedDrainService(
            budget_record_port,
            page_size=page_size,
            max_pages=max_pages,
        )
        self._clock = clock

    @classmethod
    def from_factory(cls, factory: ReportingPortFactory) -> BudgetVsExpensesQuery:
        settings = factory.settings
        return cls(
            overview_read_port=factory.overview_read_port(),
            budget_record_port=factory.budget_record_port(),
            page_size=settings.drain_page_size,
            max_pages=settings.drain_max_pages,
        )

    async def execute(self, selection: ChartSelection) -> BudgetVsExpensesResult:
        window = selection.resolve_window(self._clock())

        overview_task = asyncio.ensure_future(
            self._overview.overview(
                window=window,
                granularity=selection.granularity,
                category=selection.category,
            ),
        )
        drain_task = asyncio.ensure_future(
            self._budget_drain.drain(window, selection.filters),
        )
        try:
            overview_rows, drained = await asyncio.gather(overview_task, drain_task)
        except BaseException:
            # A failed source aborts the other; no partial series
            for task in (overview_task, drain_task):
                task.cancel()
            raise

        expenses = [
            BucketAmount(label=row.label, amount=row.expenses) for row in overview_rows
        ]
        reconciled = reconcile(drained.records, expenses, selection.granularity)

        if drained.capped:
            logger.warning(
                "Budget totals for %s may be incomplete (page cap reached)",
                selection.granularity.value,
            )
        logger.debug(
            "Budget vs expenses: %d points from %d budgets and %d overview rows",
            len(reconciled.series),
            len(drained.records),
            len(overview_rows),
        )

        return BudgetVsExpensesResult(
            granularity=selection.granularity,
            window=window,
            series=reconciled.series,
            totals=reconciled.totals,
            category=selection.category,
            capped=drained.capped,
            budget_record_count=len(drained.records),
        )
