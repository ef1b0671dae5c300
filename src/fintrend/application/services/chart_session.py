"""Hold the latest chart result across selection changes.

Every :meth:`ChartSession.refresh` re-runs the whole query for the new
selection. When an older refresh finishes after a newer one has started, its
outcome (result or error) is dropped.
"""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar

from fintrend.application.context.request_generation import (
    RequestGenerationCounter,
)
from fintrend.application.dtos.reporting import ChartSelection

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", covariant=True)
SessionResultT = TypeVar("SessionResultT")


class ChartQuery(Protocol[ResultT]):
    async def execute(self, selection: ChartSelection) -> ResultT: ...


class ChartSession(Generic[SessionResultT]):
    """Last-request-wins wrapper around one chart query."""

    def __init__(self, query: ChartQuery[SessionResultT]):
        self._query = query
        self._counter = RequestGenerationCounter()
        self._selection: ChartSelection | None = None
        self._result: SessionResultT | None = None

    @property
    def selection(self) -> ChartSelection | None:
        return self._selection

    @property
    def result(self) -> SessionResultT | None:
        return self._result

    async def refresh(self, selection: ChartSelection) -> SessionResultT | None:
        """Run the query for ``selection``.

        Returns the result, or ``None`` when a newer refresh superseded this
        one. Errors of the current refresh clear the stored result and
        propagate.
        """
        token = self._counter.begin()
        self._selection = selection

        try:
            result = await self._query.execute(selection)
        except Exception:
            if not self._counter.is_current(token):
                logger.debug("Dropping failed stale refresh %s", token)
                return None
            self._result = None
            raise

        if not self._counter.is_current(token):
            logger.debug("Dropping stale refresh %s", token)
            return None

        self._result = result
        return result
