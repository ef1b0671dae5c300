"""Factory interface handing out reporting ports.

Queries build themselves from a factory (``Query.from_factory``) so callers
only wire infrastructure once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fintrend.application.ports.reporting import (
        OverviewReadPort,
        RecordPagePort,
    )
    from fintrend_config import Settings


class ReportingPortFactory(Protocol):
    """Creates the read ports for one authenticated API session."""

    @property
    def settings(self) -> Settings: ...

    def overview_read_port(self) -> OverviewReadPort: ...

    def budget_record_port(self) -> RecordPagePort: ...
