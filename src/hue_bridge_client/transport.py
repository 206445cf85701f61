"""HTTP transport for talking to the bridge."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from .config import ClientConfig
from .exceptions import (
    BridgeApiError,
    BridgeConnectionError,
    BridgeHTTPError,
    BridgeTimeoutError,
    DecodeError,
)

_LOGGER = logging.getLogger(__name__)


class Transport(ABC):
    """Executes one request against the bridge per call."""

    @abstractmethod
    async def send_request(self, method: str, path: str, body: Any = None) -> Any:
        """
        Send a request and return the decoded JSON payload.

        Args:
            method: HTTP verb
            path: Absolute path on the bridge (e.g., /api/<username>/lights)
            body: Optional JSON-serializable request body

        Returns:
            Parsed JSON payload, or None for an empty body
        """

    async def aclose(self) -> None:
        """Release connection resources."""


class HttpTransport(Transport):
    """Transport backed by an httpx async client."""

    def __init__(
        self,
        config: ClientConfig,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Client configuration, read when each request is built
            http_transport: Optional httpx transport (used for testing)
        """
        self.config = config
        self._http_transport = http_transport
        self._async_client: Optional[httpx.AsyncClient] = None

    @property
    def async_client(self) -> httpx.AsyncClient:
        """Get or create asynchronous HTTP client."""
        if self._async_client is None:
            limits = httpx.Limits(
                max_connections=10,
                max_keepalive_connections=5,
                keepalive_expiry=30.0,
            )
            self._async_client = httpx.AsyncClient(
                limits=limits,
                transport=self._http_transport,
                follow_redirects=True,
            )
        return self._async_client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._async_client:
            await self._async_client.aclose()
            self._async_client = None

    async def send_request(self, method: str, path: str, body: Any = None) -> Any:
        # URL and deadline are captured here so later config changes
        # do not affect a request already issued.
        url = f"{self.config.base_url}{path}"
        timeout = self.config.timeout

        _LOGGER.debug("%s %s", method, url)
        try:
            response = await self.async_client.request(
                method, url, json=body, timeout=timeout
            )
        except httpx.TimeoutException as exc:
            raise BridgeTimeoutError(f"{method} {url} timed out after {timeout}s") from exc
        except httpx.RequestError as exc:
            raise BridgeConnectionError(f"{method} {url} failed: {exc}") from exc

        _LOGGER.debug("%s %s -> %s", method, url, response.status_code)
        if response.is_error:
            raise BridgeHTTPError(
                response.status_code,
                f"{method} {url} returned HTTP {response.status_code}",
            )

        payload = _decode_body(response)
        _raise_for_bridge_error(payload)
        return payload


def _decode_body(response: httpx.Response) -> Any:
    """Parse a response body as JSON, treating an empty body as None."""
    if not response.content.strip():
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"Bridge returned a non-JSON body: {exc}") from exc


def _raise_for_bridge_error(payload: Any) -> None:
    """Raise BridgeApiError for the first error entry in a bridge payload.

    The bridge reports failures with HTTP 200 and a list of
    ``{"error": {"type": ..., "address": ..., "description": ...}}`` entries.
    """
    if not isinstance(payload, list):
        return
    for entry in payload:
        if isinstance(entry, dict) and isinstance(entry.get("error"), dict):
            error = entry["error"]
            try:
                error_type = int(error.get("type", 0))
            except (TypeError, ValueError) as exc:
                raise DecodeError(
                    f"Bridge returned an error with invalid type: {error.get('type')!r}"
                ) from exc
            raise BridgeApiError(
                type=error_type,
                description=str(error.get("description", "unknown error")),
                address=error.get("address"),
            )
