"""Application queries (read side)."""

from fintrend.application.queries.reporting import (
    BudgetVsExpensesQuery,
    IncomeVsExpensesQuery,
)

__all__ = [
    "BudgetVsExpensesQuery",
    "IncomeVsExpensesQuery",
]
