"""
Embedded-state parser for YouTube playlist pages.

Extracts the ``ytInitialData`` JSON blob, the innertube API key and the web
client version from raw playlist HTML by scanning for known delimiter pairs.
Several historically used markers are tried in order; the first that yields
valid JSON wins.

Functions
---------
between
    Return the substring between two delimiters.
try_parse_between
    Decode the JSON between two delimiters, or None.
parse_body
    Build a ``ParsedResponseContext`` from a playlist page.
"""

from __future__ import annotations

import json
import logging
import re

from tubelist.models.playlist import (
    ClientContext,
    InnertubeContext,
    ParsedResponseContext,
)
from tubelist.models.request_options import EffectiveOptions

logger = logging.getLogger(__name__)

# (left delimiter, right delimiter, append closing brace)
# The "};" terminator consumes the object's closing brace, so it is restored
# before decoding.
_INITIAL_DATA_MARKERS: list[tuple[str, str, bool]] = [
    ("var ytInitialData = ", "};", True),
    ('window["ytInitialData"] = ', "};", True),
    ("var ytInitialData = ", ";</script>", False),
    ('window["ytInitialData"] = ', ";</script>", False),
]

_API_KEY_MARKERS = ['INNERTUBE_API_KEY":"', 'innertubeApiKey":"']
_CLIENT_VERSION_MARKERS = [
    'INNERTUBE_CONTEXT_CLIENT_VERSION":"',
    'innertube_context_client_version":"',
]


def between(haystack: str, left: str | re.Pattern[str], right: str) -> str:
    """
    Return the text between ``left`` and the next ``right`` delimiter.

    Parameters
    ----------
    haystack : str
        Text to search.
    left : str | re.Pattern[str]
        Left delimiter, as a literal or a compiled pattern.
    right : str
        Right delimiter, searched after the end of ``left``.

    Returns
    -------
    str
        The enclosed text, or an empty string if either delimiter is
        missing.
    """
    if isinstance(left, re.Pattern):
        match = left.search(haystack)
        if not match:
            return ""
        start = match.end()
    else:
        pos = haystack.find(left)
        if pos == -1:
            return ""
        start = pos + len(left)

    end = haystack.find(right, start)
    if end == -1:
        return ""
    return haystack[start:end]


def try_parse_between(
    body: str,
    left: str | re.Pattern[str],
    right: str,
    add_end_curly: bool = False,
) -> dict | None:
    """
    Decode the JSON object between two delimiters.

    Returns None when the delimiters are missing, the text is not valid
    JSON, or it decodes to something other than an object.
    """
    data = between(body, left, right)
    if not data:
        return None
    if add_end_curly:
        data += "}"

    try:
        decoded = json.loads(data)
    except (json.JSONDecodeError, ValueError):
        return None
    return decoded if isinstance(decoded, dict) else None


def _first_between(body: str, markers: list[str]) -> str:
    for marker in markers:
        value = between(body, marker, '"')
        if value:
            return value
    return ""


def parse_body(
    body: str, options: EffectiveOptions | None = None
) -> ParsedResponseContext:
    """
    Extract embedded state, API key and request context from a page.

    Parameters
    ----------
    body : str
        Raw HTML of a YouTube playlist page.
    options : EffectiveOptions | None, optional
        Effective options whose ``gl``, ``hl`` and ``utc_offset_minutes``
        override the context defaults when set.

    Returns
    -------
    ParsedResponseContext
        ``json_data`` is None and ``api_key`` empty when not found. This
        function never raises on malformed input.
    """
    json_data: dict | None = None
    for left, right, add_end_curly in _INITIAL_DATA_MARKERS:
        json_data = try_parse_between(body, left, right, add_end_curly)
        if json_data is not None:
            logger.debug("Recovered ytInitialData via %r ... %r", left, right)
            break

    api_key = _first_between(body, _API_KEY_MARKERS)
    client_version = _first_between(body, _CLIENT_VERSION_MARKERS)

    client = ClientContext(client_version=client_version)
    if options is not None:
        if options.gl:
            client.gl = options.gl
        if options.hl:
            client.hl = options.hl
        if options.utc_offset_minutes:
            client.utc_offset_minutes = options.utc_offset_minutes

    if json_data is None:
        logger.debug("No ytInitialData found in %d-byte page", len(body))

    return ParsedResponseContext(
        json_data=json_data,
        api_key=api_key,
        context=InnertubeContext(client=client),
    )
