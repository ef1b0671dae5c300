"""Reconciled chart series.

``remaining`` is a computed field on both points and totals, so it can never
drift from ``budget - expenses``.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, computed_field


class SeriesPoint(BaseModel):
    """One bucket of the budget vs expenses comparison."""

    label: str
    budget: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def remaining(self) -> Decimal:
        return self.budget - self.expenses


class Totals(BaseModel):
    """Elementwise sum over a series."""

    budget: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def remaining(self) -> Decimal:
        return self.budget - self.expenses

    @classmethod
    def of(cls, series: list[SeriesPoint]) -> Totals:
        return cls(
            budget=sum((p.budget for p in series), Decimal("0")),
            expenses=sum((p.expenses for p in series), Decimal("0")),
        )


class ReconciledSeries(BaseModel):
    """Sorted, deduplicated series plus its totals."""

    series: list[SeriesPoint]
    totals: Totals

    model_config = ConfigDict(frozen=True)

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.series]

    @property
    def is_empty(self) -> bool:
        return not self.series
