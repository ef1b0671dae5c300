"""Filters applied to record queries before bucketing."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class RecordFilters(BaseModel):
    """Category/search filter passed through to paged record queries.

    Blank values mean "no filter".
    """

    category: str | None = None
    search: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("category", "search", mode="before")
    @classmethod
    def _blank_is_none(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @property
    def is_empty(self) -> bool:
        return self.category is None and self.search is None
