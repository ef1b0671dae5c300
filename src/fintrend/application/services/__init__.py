"""Application services."""

from fintrend.application.services.chart_session import ChartQuery, ChartSession
from fintrend.application.services.paginated_drain_service import (
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    FetchPage,
    PaginatedDrainService,
    drain_pages,
)

__all__ = [
    "ChartQuery",
    "ChartSession",
    "DEFAULT_MAX_PAGES",
    "DEFAULT_PAGE_SIZE",
    "FetchPage",
    "PaginatedDrainService",
    "drain_pages",
]
