"""Reporting DTOs - data transfer objects for charts."""

from fintrend.application.dtos.reporting.chart_selection import ChartSelection
from fintrend.application.dtos.reporting.reporting_dto import (
    BudgetVsExpensesResult,
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
