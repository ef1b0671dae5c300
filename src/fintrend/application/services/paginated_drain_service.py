"""Drain a paged record source into memory.

Pages are requested one after another; page N+1 is only requested once page N
has arrived. The drain ends on the first short page or when the page cap is
reached. A failing page aborts the whole drain and the error propagates as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol

from fintrend.application.dtos.reporting import DrainResult
from fintrend.domain.reporting import DateRange, RawRecord, RecordFilters

if TYPE_CHECKING:
    from fintrend.application.ports.reporting import RecordPagePort

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100
DEFAULT_MAX_PAGES = 50


class FetchPage(Protocol):
    def __call__(
        self,
        *,
        page: int,
        page_size: int,
        window: DateRange,
        filters: RecordFilters,
    ) -> Awaitable[list[RawRecord]]: ...


async def drain_pages(
    fetch_page: FetchPage,
    window: DateRange,
    filters: RecordFilters | None = None,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> DrainResult:
    """Collect every record in ``window`` matching ``filters``."""
    if page_size < 1:
        msg = f"page_size must be positive, got {page_size}"
        raise ValueError(msg)
    if max_pages < 1:
        msg = f"max_pages must be positive, got {max_pages}"
        raise ValueError(msg)

    filters = filters or RecordFilters()
    records: list[RawRecord] = []

    for page in range(1, max_pages + 1):
        batch = await fetch_page(
            page=page,
            page_size=page_size,
            window=window,
            filters=filters,
        )
        records.extend(batch)
        logger.debug("Fetched page %d with %d records", page, len(batch))

        if len(batch) < page_size:
            return DrainResult(records=records, pages_fetched=page, capped=False)

    logger.warning(
        "Stopped draining after %d full pages (%d records); totals may be "
        "incomplete",
        max_pages,
        len(records),
    )
    return DrainResult(records=records, pages_fetched=max_pages, capped=True)


class PaginatedDrainService:
    """Drain a :class:`RecordPagePort` with configured page size and cap."""

    def __init__(
        self,
        record_port: RecordPagePort,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        self._record_port = record_port
        self._page_size = page_size
        self._max_pages = max_pages

    async def drain(
        self,
        window: DateRange,
        filters: RecordFilters | None = None,
    ) -> DrainResult:
        return await drain_pages(
            self._record_port.fetch_page,
            window,
            filters,
            page_size=self._page_size,
            max_pages=self._max_pages,
        )
