"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pitwall.exceptions import (
    PitwallAPIError,
    PitwallConnectionError,
    PitwallTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 120.0


def _error_message(response: httpx.Response) -> str:
    """Pull ``error.message`` out of a JSON error body, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.text


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise PitwallAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    return response.json()  # type: ignore[no-any-return]


def _headers(api_key: str) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "x-goog-api-key": api_key,
    }


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=_headers(api_key),
        )

    def post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Perform a POST request and return parsed JSON."""
        logger.debug("POST %s", endpoint)
        try:
            response = self._client.post(endpoint, json=payload)
        except httpx.ConnectError as exc:
            raise PitwallConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise PitwallTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=_headers(api_key),
        )

    async def post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Perform an async POST request and return parsed JSON."""
        logger.debug("POST %s", endpoint)
        try:
            response = await self._client.post(endpoint, json=payload)
        except httpx.ConnectError as exc:
            raise PitwallConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise PitwallTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
