"""Application factories."""

from fintrend.application.factories.reporting_port_factory import (
    ReportingPortFactory,
)

__all__ = ["ReportingPortFactory"]
