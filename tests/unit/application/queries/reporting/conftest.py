"""Shared fixtures for reporting query tests."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from fintrend.application.dtos.reporting import OverviewRow
from fintrend.domain.reporting import RawRecord

FIXED_NOW = datetime(2025, 5, 10, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Clock pinned to 2025-05-10 14:30 UTC."""
    return lambda: FIXED_NOW


@pytest.fixture
def mock_overview_port():
    """Overview port returning three monthly rows."""
    port = AsyncMock()
    port.overview.return_value = [
        OverviewRow(label="2025-01", income=Decimal("3000"), expenses=Decimal("1200")),
        OverviewRow(label="2025-02", income=Decimal("3000"), expenses=Decimal("300")),
        OverviewRow(label="2025-03", income=Decimal("3100"), expenses=Decimal("950")),
    ]
    return port


@pytest.fixture
def sample_budgets():
    """Budgets created in January (two) and March (one)."""
    return [
        RawRecord(
            amount=Decimal("1000"),
            occurred_at=datetime(2025, 1, 5, tzinfo=timezone.utc),
            category="Food",
        ),
        RawRecord(
            amount=Decimal("500"),
            occurred_at=datetime(2025, 1, 20, tzinfo=timezone.utc),
            category="Rent",
        ),
        RawRecord(
            amount=Decimal("800"),
            occurred_at=datetime(2025, 3, 2, tzinfo=timezone.utc),
            category="Food",
        ),
    ]


@pytest.fixture
def mock_budget_port(sample_budgets):
    """Budget port serving ``sample_budgets`` as a single short page."""
    port = AsyncMock()
    port.fetch_page.return_value = sample_budgets
    return port


@pytest.fixture
def mock_factory(mock_overview_port, mock_budget_port):
    """Port factory handing out the mocked ports."""
    factory = MagicMock()
    factory.settings.drain_page_size = 25
    factory.settings.drain_max_pages = 4
    factory.overview_read_port.return_value = mock_overview_port
    factory.budget_record_port.return_value = mock_budget_port
    return factory
