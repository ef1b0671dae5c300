"""HTTP client for the personal-finance REST API."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

import httpx

from fintrend.domain.reporting import DateRange
from fintrend.domain.shared.exceptions import DomainException, ErrorCode
from fintrend.domain.shared.time import to_utc

if TYPE_CHECKING:
    from fintrend_config import Settings

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Something went wrong."


class FinanceApiError(DomainException):
    """Raised when the finance API cannot deliver a page or overview."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.FETCH_FAILED, details)
        self.status_code = status_code


def extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of a FastAPI error body."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        detail = data.get("detail")
        if isinstance(detail, str) and detail:
            return detail
        if isinstance(detail, list):
            messages = [
                str(item.get("msg") or item.get("detail") or item.get("type"))
                for item in detail
                if isinstance(item, dict)
                and (item.get("msg") or item.get("detail") or item.get("type"))
            ]
            if messages:
                return "; ".join(messages)
        message = data.get("message")
        if isinstance(message, str) and message:
            return message

    return response.reason_phrase or FALLBACK_ERROR_MESSAGE


def _iso(moment: datetime) -> str:
    return to_utc(moment).isoformat()


def window_params(window: DateRange) -> dict[str, str]:
    """Query parameters limiting a listing to ``window``."""
    params: dict[str, str] = {}
    if window.start is not None:
        params["start_date"] = _iso(window.start)
    if window.end is not None:
        params["end_date"] = _iso(window.end)
    return params


class FinanceApiClient:
    """Thin ``httpx.AsyncClient`` wrapper adding auth and error mapping."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        access_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._access_token = access_token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> FinanceApiClient:
        token = settings.api_access_token
        return cls(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout,
            access_token=token.get_secret_value() if token else None,
            transport=transport,
        )

    async def __aenter__(self) -> FinanceApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body."""
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = extract_error_message(e.response)
            logger.warning(
                "Finance API %s returned %d: %s",
                path,
                e.response.status_code,
                message,
            )
            raise FinanceApiError(
                message,
                status_code=e.response.status_code,
                details={"path": path},
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Finance API request to %s failed: %s", path, e)
            raise FinanceApiError(
                str(e) or FALLBACK_ERROR_MESSAGE,
                details={"path": path},
            ) from e

        try:
            return response.json()
        except ValueError as e:
            msg = f"Finance API returned invalid JSON for {path}"
            raise FinanceApiError(msg, details={"path": path}) from e
