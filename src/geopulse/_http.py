"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from geopulse import config
from geopulse.exceptions import (
    NetworkError,
    NetworkTimeoutError,
    ProviderError,
    ProviderValidationError,
)


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return parsed JSON."""
    if not 200 <= response.status_code < 300:
        raise ProviderError(response.text, status_code=response.status_code)
    try:
        return response.json()  # type: ignore[no-any-return]
    except ValueError as exc:
        raise ProviderValidationError(f"Response body is not valid JSON: {exc}") from exc


def _default_headers(user_agent: str) -> dict[str, str]:
    return {"Accept": "application/json", "User-Agent": user_agent}


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = config.POWER_BASE_URL,
        user_agent: str = config.USER_AGENT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=config.REQUEST_TIMEOUT,
            headers=_default_headers(user_agent),
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise NetworkTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = config.POWER_BASE_URL,
        user_agent: str = config.USER_AGENT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=config.REQUEST_TIMEOUT,
            headers=_default_headers(user_agent),
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise NetworkTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
