"""Wire models for finance API payloads.

Overview rows have been served under several field names over time, so each
field accepts all known aliases.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from fintrend.application.dtos.reporting import OverviewRow
from fintrend.domain.reporting import RawRecord


def _lenient_decimal(v: Any) -> Decimal:
    """Numbers the API sends as null or garbage count as zero."""
    if v is None or isinstance(v, bool):
        return Decimal("0")
    try:
        value = Decimal(str(v))
    except InvalidOperation:
        return Decimal("0")
    if not value.is_finite():
        return Decimal("0")
    return value


class BudgetPayload(BaseModel):
    """One item of ``GET /budgets/``."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    category: str | None = None
    limit_amount: Decimal = Decimal("0")
    period: str | None = None
    created_at: datetime

    @field_validator("limit_amount", mode="before")
    @classmethod
    def _amount(cls, v: Any) -> Decimal:
        return _lenient_decimal(v)

    def to_record(self) -> RawRecord:
        return RawRecord(
            amount=self.limit_amount,
            occurred_at=self.created_at,
            category=self.category,
        )


class OverviewRowPayload(BaseModel):
    """One bucket of ``GET /summary/overview``."""

    model_config = ConfigDict(extra="ignore")

    label: str = Field(
        default="",
        validation_alias=AliasChoices("period", "label", "bucket"),
    )
    income: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("total_income", "income", "sum_income"),
    )
    expenses: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("total_expenses", "expenses", "sum_expenses"),
    )
    net: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices("net_balance", "net"),
    )

    @field_validator("label", mode="before")
    @classmethod
    def _label(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("income", "expenses", mode="before")
    @classmethod
    def _amount(cls, v: Any) -> Decimal:
        return _lenient_decimal(v)

    @field_validator("net", mode="before")
    @classmethod
    def _net(cls, v: Any) -> Decimal | None:
        return None if v is None else _lenient_decimal(v)

    def to_row(self) -> OverviewRow:
        return OverviewRow(
            label=self.label,
            income=self.income,
            expenses=self.expenses,
            net_balance=self.net,
        )


class OverviewPayload(BaseModel):
    """Envelope of ``GET /summary/overview``."""

    model_config = ConfigDict(extra="ignore")

    results: list[OverviewRowPayload] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _results(cls, v: Any) -> list[Any]:
        return v if isinstance(v, list) else []

    @classmethod
    def parse(cls, data: Any) -> OverviewPayload:
        """Accept either the envelope or a bare list of rows."""
        if isinstance(data, list):
            return cls.model_validate({"results": data})
        if isinstance(data, dict):
            return cls.model_validate(data)
        return cls()

    def rows(self) -> list[OverviewRow]:
        return [row.to_row() for row in self.results if row.label]
