"""Application DTOs."""

from fintrend.application.dtos.reporting import (
    BudgetVsExpensesResult,
    ChartSelection,
    DrainResult,
    IncomeExpensePoint,
    IncomeExpenseTotals,
    IncomeVsExpensesResult,
    OverviewRow,
)

__all__ = [
    "BudgetVsExpensesResult",
    "ChartSelection",
    "DrainResult",
    "IncomeExpensePoint",
    "IncomeExpenseTotals",
    "IncomeVsExpensesResult",
    "OverviewRow",
]
