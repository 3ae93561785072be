"""
Playlist identifier resolution.

Turns a free-form query (playlist URL, bare playlist ID, channel ID, or
channel link) into the canonical playlist identifier used by every
downstream call.

Functions
---------
resolve_playlist_id
    Resolve a query, fetching channel profile pages when needed.
is_valid_playlist_query
    Check a query with the same rules, without network access.
resolve_channel_reference
    Find the uploads playlist of a ``/user/`` or ``/c/`` profile page.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import SplitResult, parse_qsl, urljoin, urlsplit

from tubelist.exceptions import (
    InvalidQueryError,
    UnresolvableReferenceError,
    UnsupportedMixError,
)
from tubelist.models.youtube_types import (
    MIX_PREFIX,
    UPLOADS_PREFIX,
    channel_to_uploads_id,
    is_channel_id,
    is_playlist_id,
)
from tubelist.services.interfaces import TransportInterface

logger = logging.getLogger(__name__)

BASE_PLAYLIST_URL = "https://www.youtube.com/playlist?"
BASE_PROFILE_URL = "https://www.youtube.com"
YOUTUBE_HOSTS = frozenset({"www.youtube.com", "youtube.com", "music.youtube.com"})
_DEFAULT_PORTS = {"http": 80, "https": 443}

_CHANNEL_ON_PAGE_RE = re.compile(r'channel_id=UC([\w-]{22,32})"')


def _is_youtube_host(parsed: SplitResult) -> bool:
    """Compare the lower-cased host; only the scheme's default port is accepted."""
    try:
        port = parsed.port
    except ValueError:
        return False
    if port is not None and port != _DEFAULT_PORTS.get(parsed.scheme):
        return False
    return parsed.hostname in YOUTUBE_HOSTS


@dataclass(frozen=True)
class _Resolution:
    """Outcome of classifying a query without network access."""

    list_id: str | None = None
    reference: str | None = None
    error: InvalidQueryError | None = None


def _classify(query: object) -> _Resolution:
    if not isinstance(query, str) or not query:
        return _Resolution(error=InvalidQueryError("The query has to be a string!", query=query))

    if is_playlist_id(query):
        return _Resolution(list_id=query)

    if is_channel_id(query):
        return _Resolution(list_id=channel_to_uploads_id(query))

    try:
        parsed = urlsplit(urljoin(BASE_PLAYLIST_URL, query))
    except ValueError:
        return _Resolution(error=InvalidQueryError(f'Unable to parse "{query}"!', query=query))

    if not _is_youtube_host(parsed):
        return _Resolution(error=InvalidQueryError("Not a known youtube link!", query=query))

    params = parse_qsl(parsed.query, keep_blank_values=True)
    list_values = [value for key, value in params if key == "list"]
    if list_values:
        list_param = list_values[0]
        if is_playlist_id(list_param):
            return _Resolution(list_id=list_param)
        if list_param.startswith(MIX_PREFIX):
            return _Resolution(error=UnsupportedMixError(query=query))
        return _Resolution(
            error=InvalidQueryError("Invalid or unknown list query in url!", query=query)
        )

    segments = parsed.path[1:].split("/")
    if len(segments) < 2 or not all(segments):
        return _Resolution(error=InvalidQueryError(f'Unable to find a id in "{query}"!', query=query))

    maybe_type, maybe_id = segments[-2], segments[-1]
    if maybe_type == "channel" and is_channel_id(maybe_id):
        return _Resolution(list_id=channel_to_uploads_id(maybe_id))
    if maybe_type in ("user", "c"):
        return _Resolution(reference=f"{BASE_PROFILE_URL}/{maybe_type}/{maybe_id}")

    return _Resolution(error=InvalidQueryError(f'Unable to find a id in "{query}"!', query=query))


async def resolve_channel_reference(
    reference: str,
    transport: TransportInterface,
    headers: Mapping[str, str] | None = None,
) -> str:
    """
    Resolve a channel profile URL to its uploads playlist ID.

    Parameters
    ----------
    reference : str
        Profile URL such as ``https://www.youtube.com/user/<name>``.
    transport : TransportInterface
        HTTP transport used to fetch the profile page.
    headers : Mapping[str, str] | None, optional
        Headers sent with the request.

    Returns
    -------
    str
        ``UU`` followed by the channel ID found on the page.

    Raises
    ------
    UnresolvableReferenceError
        If the page carries no channel ID marker.
    """
    body = await transport.get_text(reference, headers=headers)
    match = _CHANNEL_ON_PAGE_RE.search(body)
    if not match:
        raise UnresolvableReferenceError(reference)

    list_id = UPLOADS_PREFIX + match.group(1)
    logger.debug("Resolved %s to uploads playlist %s", reference, list_id)
    return list_id


async def resolve_playlist_id(
    query: object,
    transport: TransportInterface,
    headers: Mapping[str, str] | None = None,
) -> str:
    """
    Resolve a free-form query to a canonical playlist ID.

    Parameters
    ----------
    query : object
        Playlist URL or ID, channel ID, or channel link.
    transport : TransportInterface
        HTTP transport, used only for ``/user/`` and ``/c/`` links.
    headers : Mapping[str, str] | None, optional
        Headers sent when fetching a profile page.

    Returns
    -------
    str
        The canonical playlist identifier.

    Raises
    ------
    InvalidQueryError
        If the query is not a recognizable playlist reference.
    UnsupportedMixError
        If the query points at a radio mix.
    UnresolvableReferenceError
        If a channel link's page carries no channel ID.

    Examples
    --------
    >>> await resolve_playlist_id("UCuAXFkgsw1L7xaCfnd5JJOw", transport)
    'UUuAXFkgsw1L7xaCfnd5JJOw'
    """
    resolution = _classify(query)
    if resolution.error is not None:
        raise resolution.error
    if resolution.reference is not None:
        return await resolve_channel_reference(resolution.reference, transport, headers)
    assert resolution.list_id is not None
    return resolution.list_id


def is_valid_playlist_query(query: object) -> bool:
    """
    Return True if ``query`` would resolve to a playlist ID.

    Channel links (``/user/`` and ``/c/``) are accepted without fetching
    the profile page, so ``resolve_playlist_id`` may still fail for them
    with ``UnresolvableReferenceError``. Never raises.
    """
    return _classify(query).error is None
