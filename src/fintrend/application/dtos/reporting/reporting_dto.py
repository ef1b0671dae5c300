"""Reporting DTOs for chart rendering.

These DTOs carry the reconciled series plus the context a chart needs to
label itself (granularity, resolved window, completeness flag).
"""

from dataclasses import dataclass, field
from decimal import Decimal

from fintrend.domain.reporting import (
    DateRange,
    Granularity,
    RawRecord,
    SeriesPoint,
    Totals,
    tooltip_label,
)


@dataclass
class DrainResult:
    """All records pulled from a paged source.

    ``capped`` is set when the page cap stopped the drain while the last page
    was still full, so more data may exist.
    """

    records: list[RawRecord]
    pages_fetched: int
    capped: bool = False


@dataclass
class OverviewRow:
    """One bucket of the server-side income/expense overview.

    ``net_balance`` is the net the server reported, if any; ``net`` prefers it
    over ``income - expenses``.
    """

    label: str
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    net_balance: Decimal | None = None

    @property
    def net(self) -> Decimal:
        if self.net_balance is not None:
            return self.net_balance
        return self.income - self.expenses


@dataclass
class BudgetVsExpensesResult:
    """Budget vs expenses chart data.

    Used for:
    - Grouped bar chart (budget, expenses, remaining per bucket)
    - Totals cards above the chart
    """

    granularity: Granularity
    window: DateRange
    series: list[SeriesPoint]
    totals: Totals
    category: str | None = None
    capped: bool = False  # Budget drain hit the page cap
    budget_record_count: int = 0

    def tooltip(self, label: str) -> str:
        return tooltip_label(label, self.granularity)


@dataclass
class IncomeExpensePoint:
    """Single bucket of the income vs expenses chart.

    ``net`` is the server-reported net where the overview carries one.
    """

    label: str
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass
class IncomeExpenseTotals:
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    net: Decimal = Decimal("0")


@dataclass
class IncomeVsExpensesResult:
    """Income vs expenses chart data; totals are derived from the points."""

    granularity: Granularity
    window: DateRange
    points: list[IncomeExpensePoint] = field(default_factory=list)
    totals: IncomeExpenseTotals = field(default_factory=IncomeExpenseTotals)
    category: str | None = None

    def tooltip(self, label: str) -> str:
        return tooltip_label(label, self.granularity)
