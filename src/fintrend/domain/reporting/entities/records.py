"""Inputs to series reconciliation."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _to_decimal(v: Any) -> Decimal:
    if v is None:
        return Decimal("0")
    if not isinstance(v, Decimal):
        v = Decimal(str(v))
    return v


class RawRecord(BaseModel):
    """One budget, expense or income item that still has to be bucketed."""

    amount: Decimal
    occurred_at: datetime
    category: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        return _to_decimal(v)


class BucketAmount(BaseModel):
    """A per-bucket total already aggregated by the server."""

    label: str
    amount: Decimal

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        return _to_decimal(v)

    @field_validator("label", mode="before")
    @classmethod
    def strip_label(cls, v: Any) -> str:
        return str(v).strip() if v is not None else ""
