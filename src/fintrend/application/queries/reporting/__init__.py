"""Reporting queries for comparison charts."""

from fintrend.application.queries.reporting.budget_vs_expenses_query import (
    BudgetVsExpensesQuery,
)
from fintrend.application.queries.reporting.income_vs_expenses_query import (
    IncomeVsExpensesQuery,
)

__all__ = [
    "BudgetVsExpensesQuery",
    "IncomeVsExpensesQuery",
]
