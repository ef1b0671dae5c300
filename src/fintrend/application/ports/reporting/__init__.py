"""Reporting ports (read side)."""

from fintrend.application.ports.reporting.reporting_read_ports import (
    OverviewReadPort,
    RecordPagePort,
)

__all__ = ["OverviewReadPort", "RecordPagePort"]
