"""Finance API implementations of the reporting read ports."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fintrend.application.dtos.reporting import OverviewRow
from fintrend.application.ports.reporting import OverviewReadPort, RecordPagePort
from fintrend.domain.reporting import (
    DateRange,
    Granularity,
    RawRecord,
    RecordFilters,
)
from fintrend.infrastructure.integration.finance_api.client import (
    FinanceApiClient,
    FinanceApiError,
    window_params,
)
from fintrend.infrastructure.integration.finance_api.schemas import (
    BudgetPayload,
    OverviewPayload,
)

logger = logging.getLogger(__name__)


class HttpBudgetRecordAdapter(RecordPagePort):
    """Pages through ``GET /budgets/`` using skip/limit offsets."""

    PATH = "/budgets/"

    def __init__(self, client: FinanceApiClient):
        self._client = client

    @staticmethod
    def build_params(
        page: int,
        page_size: int,
        window: DateRange,
        filters: RecordFilters,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"skip": (page - 1) * page_size, "limit": page_size}
        params.update(window_params(window))
        if filters.category:
            params["category"] = filters.category
        if filters.search:
            params["search"] = filters.search
        return params

    async def fetch_page(
        self,
        *,
        page: int,
        page_size: int,
        window: DateRange,
        filters: RecordFilters,
    ) -> list[RawRecord]:
        params = self.build_params(page, page_size, window, filters)
        data = await self._client.get_json(self.PATH, params)

        if not isinstance(data, list):
            msg = f"Expected a list of budgets, got {type(data).__name__}"
            raise FinanceApiError(msg, details={"path": self.PATH, "page": page})

        try:
            return [BudgetPayload.model_validate(item).to_record() for item in data]
        except PydanticValidationError as e:
            logger.warning("Malformed budget on page %d: %s", page, e)
            msg = "Finance API returned a malformed budget"
            raise FinanceApiError(msg, details={"path": self.PATH, "page": page}) from e


class HttpOverviewReadAdapter(OverviewReadPort):
    """Reads ``GET /summary/overview`` grouped by bucket."""

    PATH = "/summary/overview"

    def __init__(self, client: FinanceApiClient):
        self._client = client

    async def overview(
        self,
        *,
        window: DateRange,
        granularity: Granularity,
        category: str | None = None,
    ) -> list[OverviewRow]:
        params: dict[str, Any] = {"group_by": granularity.value}
        params.update(window_params(window))
        if category:
            params["category"] = category

        data = await self._client.get_json(self.PATH, params)
        try:
            payload = OverviewPayload.parse(data)
        except PydanticValidationError as e:
            logger.warning("Malformed overview payload: %s", e)
            msg = "Finance API returned a malformed overview"
            raise FinanceApiError(msg, details={"path": self.PATH}) from e

        return payload.rows()
