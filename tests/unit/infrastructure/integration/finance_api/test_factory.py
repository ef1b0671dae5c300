"""Tests for HttpReportingPortFactory."""

from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest

from fintrend.application.dtos.reporting import ChartSelection
from fintrend.application.queries import BudgetVsExpensesQuery
from fintrend.infrastructure.integration.finance_api import (
    HttpBudgetRecordAdapter,
    HttpOverviewReadAdapter,
    HttpReportingPortFactory,
)
from fintrend_config import Settings


def fake_api(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/summary/overview":
        return httpx.Response(
            200,
            json={"results": [{"period": "2025-02", "total_expenses": 40}]},
        )
    return httpx.Response(
        200,
        json=[
            {
                "id": 1,
                "category": "Food",
                "limit_amount": 100,
                "created_at": "2025-02-01T09:00:00Z",
            },
        ],
    )


class TestHttpReportingPortFactory:
    def test_hands_out_http_adapters(self):
        factory = HttpReportingPortFactory.from_settings(Settings())

        assert isinstance(factory.overview_read_port(), HttpOverviewReadAdapter)
        assert isinstance(factory.budget_record_port(), HttpBudgetRecordAdapter)

    def test_exposes_settings(self):
        settings = Settings(drain_page_size=20)

        factory = HttpReportingPortFactory.from_settings(settings)

        assert factory.settings is settings

    @pytest.mark.asyncio
    async def test_query_end_to_end_over_mock_transport(self):
        factory = HttpReportingPortFactory.from_settings(
            Settings(api_access_token="tok"),
            transport=httpx.MockTransport(fake_api),
        )
        query = BudgetVsExpensesQuery.from_factory(factory)
        query._clock = lambda: datetime(2025, 2, 10, tzinfo=timezone.utc)

        try:
            result = await query.execute(ChartSelection(quick_range="month"))
        finally:
            await factory.close()

        assert [p.label for p in result.series] == ["2025-02"]
        assert result.series[0].remaining == Decimal("60")
