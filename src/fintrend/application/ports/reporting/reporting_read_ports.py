"""Reporting read ports.

These are the two data sources behind the comparison charts: a paged,
filtered record listing and a server-side per-bucket overview.
"""

from __future__ import annotations

from typing import Protocol

from fintrend.application.dtos.reporting import OverviewRow
from fintrend.domain.reporting import (
    DateRange,
    Granularity,
    RawRecord,
    RecordFilters,
)


class RecordPagePort(Protocol):
    """Paged record listing (budgets, expenses, incomes)."""

    async def fetch_page(
        self,
        *,
        page: int,
        page_size: int,
        window: DateRange,
        filters: RecordFilters,
    ) -> list[RawRecord]:
        """Return page ``page`` (1-based) with at most ``page_size`` records."""
        ...


class OverviewReadPort(Protocol):
    """Per-bucket income and expense totals aggregated by the server."""

    async def overview(
        self,
        *,
        window: DateRange,
        granularity: Granularity,
        category: str | None = None,
    ) -> list[OverviewRow]:
        ...
