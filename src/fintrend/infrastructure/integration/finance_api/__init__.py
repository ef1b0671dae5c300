"""Finance REST API integration."""

from fintrend.infrastructure.integration.finance_api.adapters import (
    HttpBudgetRecordAdapter,
    HttpOverviewReadAdapter,
)
from fintrend.infrastructure.integration.finance_api.client import (
    FinanceApiClient,
    FinanceApiError,
    extract_error_message,
    window_params,
)
from fintrend.infrastructure.integration.finance_api.factory import (
    HttpReportingPortFactory,
)

__all__ = [
    "FinanceApiClient",
    "FinanceApiError",
    "HttpBudgetRecordAdapter",
    "HttpOverviewReadAdapter",
    "HttpReportingPortFactory",
    "extract_error_message",
    "window_params",
]
