"""HTTP transport: abstract interface and httpx-backed implementation."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from microsoft_translator.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and decoded JSON body of a response."""

    status: int
    json_body: Any


class Transport(ABC):
    """Base class for HTTP transports used by the translator client."""

    @abstractmethod
    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes,
    ) -> TransportResponse:
        """Send one request and decode its JSON body.

        Args:
            url: Absolute request URL, query string included.
            method: HTTP method (e.g. "POST").
            headers: Request headers.
            body: Encoded request body.

        Returns:
            The response status and parsed JSON body.

        Raises:
            TransportError: on network failure, timeout, or a body that is
                not valid JSON.
        """
        ...

    async def close(self) -> None:
        """Release any held connections."""


class HttpxTransport(Transport):
    """Sends requests through an ``httpx.AsyncClient``.

    Args:
        timeout: Request timeout in seconds.
        client: Pre-built client to use instead of creating one.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    async def send(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: bytes,
    ) -> TransportResponse:
        try:
            response = await self._client.request(method, url, headers=headers, content=body)
        except httpx.TimeoutException as exc:
            logger.error("Translator request timed out: %s %s", method, url)
            raise TransportError(f"Request timed out: {exc}", cause=exc) from exc
        except httpx.HTTPError as exc:
            logger.error("Translator request failed: %s %s: %s", method, url, exc)
            raise TransportError(f"Request failed: {exc}", cause=exc) from exc

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error(
                "Translator returned a non-JSON body: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            raise TransportError(
                f"Response is not valid JSON (HTTP {response.status_code})", cause=exc
            ) from exc

        return TransportResponse(status=response.status_code, json_body=payload)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
