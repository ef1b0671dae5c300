"""Reporting port factory backed by the finance REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrend.application.factories import ReportingPortFactory
from fintrend.infrastructure.integration.finance_api.adapters import (
    HttpBudgetRecordAdapter,
    HttpOverviewReadAdapter,
)
from fintrend.infrastructure.integration.finance_api.client import FinanceApiClient
from fintrend_config import get_settings

if TYPE_CHECKING:
    import httpx

    from fintrend_config import Settings


class HttpReportingPortFactory(ReportingPortFactory):
    """Shares one API client between all ports it hands out."""

    def __init__(self, client: FinanceApiClient, settings: Settings):
        self._client = client
        self._settings = settings

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HttpReportingPortFactory:
        settings = settings or get_settings()
        client = FinanceApiClient.from_settings(settings, transport=transport)
        return cls(client=client, settings=settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    def overview_read_port(self) -> HttpOverviewReadAdapter:
        return HttpOverviewReadAdapter(self._client)

    def budget_record_port(self) -> HttpBudgetRecordAdapter:
        return HttpBudgetRecordAdapter(self._client)

    async def close(self) -> None:
        await self._client.close()
