"""
Abstract Base Class for HTTP transports.

The playlist pipeline needs exactly two HTTP operations: fetching a page as
text and posting a JSON payload to the innertube API. Timeouts, proxying and
TLS are the transport's concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class TransportInterface(ABC):
    """
    Abstract interface for the HTTP transport used by the playlist pipeline.

    Examples
    --------
    >>> class StaticTransport(TransportInterface):
    ...     async def get_text(self, url, headers=None):
    ...         return "<html></html>"
    ...     async def post_json(self, url, payload, headers=None):
    ...         return {}
    """

    @abstractmethod
    async def get_text(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> str:
        """
        Fetch ``url`` with GET and return the response body as text.

        Parameters
        ----------
        url : str
            Absolute URL to fetch.
        headers : Mapping[str, str] | None, optional
            Per-call header overrides.

        Returns
        -------
        str
            Decoded response body.

        Raises
        ------
        NetworkError
            If the request fails at the transport level.
        """
        pass

    @abstractmethod
    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        POST ``payload`` as JSON to ``url`` and return the decoded JSON body.

        Parameters
        ----------
        url : str
            Absolute URL to post to.
        payload : dict[str, Any]
            JSON-serializable request body.
        headers : Mapping[str, str] | None, optional
            Per-call header overrides.

        Returns
        -------
        Any
            The decoded JSON response.

        Raises
        ------
        NetworkError
            If the request fails or the response is not valid JSON.
        """
        pass
