"""
httpx-based HTTP transport for the playlist pipeline.

Classes
-------
HttpxTransport
    ``TransportInterface`` implementation backed by ``httpx.AsyncClient``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tubelist.exceptions import NetworkError
from tubelist.services.interfaces import TransportInterface

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpxTransport(TransportInterface):
    """
    HTTP transport backed by ``httpx.AsyncClient``.

    A fresh client is opened per request. Transport-level failures and
    undecodable JSON bodies are raised as ``NetworkError`` with the original
    exception attached. HTTP error statuses are not raised: YouTube answers
    unknown playlists with regular pages, which the parser inspects.

    Parameters
    ----------
    timeout : float, optional
        Request timeout in seconds (default: 30.0).
    transport : httpx.AsyncBaseTransport | None, optional
        Low-level httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Examples
    --------
    >>> transport = HttpxTransport(timeout=10.0)
    >>> html = await transport.get_text("https://www.youtube.com/playlist?list=PL...")
    """

    def __init__(
        self,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            follow_redirects=True,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def get_text(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> str:
        """Fetch ``url`` and return the body as text."""
        try:
            async with self._client() as client:
                response = await client.get(url, headers=dict(headers or {}))
        except httpx.HTTPError as e:
            raise NetworkError(
                message=f"GET {url} failed: {type(e).__name__}: {e}",
                original_error=e,
                url=url,
            ) from e

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return response.text

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """POST ``payload`` as JSON and return the decoded response."""
        try:
            async with self._client() as client:
                response = await client.post(
                    url, json=payload, headers=dict(headers or {})
                )
        except httpx.HTTPError as e:
            raise NetworkError(
                message=f"POST {url} failed: {type(e).__name__}: {e}",
                original_error=e,
                url=url,
            ) from e

        logger.debug("POST %s -> %d", url, response.status_code)
        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise NetworkError(
                message=f"POST {url} returned a non-JSON body (status {response.status_code})",
                original_error=e,
                url=url,
            ) from e
