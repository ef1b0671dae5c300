"""Application layer ports (aka interfaces)."""

from fintrend.application.ports.reporting import OverviewReadPort, RecordPagePort

__all__ = [
    "OverviewReadPort",
    "RecordPagePort",
]
