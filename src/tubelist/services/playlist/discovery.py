"""
Free-text playlist discovery.

Searches YouTube for playlists matching a text query, then looks up each
candidate with ``PlaylistClient.search``. Candidates are processed one at a
time; each lookup builds its own effective options, so item limits and
retry budgets are never shared between playlists.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

from tubelist.exceptions import PlaylistSearchError
from tubelist.models.playlist import PlaylistResult
from tubelist.models.request_options import RequestOptions, build_headers
from tubelist.services.playlist.orchestrator import PlaylistClient

logger = logging.getLogger(__name__)

# sp=EgIQAw%3D%3D restricts results to playlists
SEARCH_URL_TEMPLATE = "https://www.youtube.com/results?search_query={query}&sp=EgIQAw%253D%253D"
DEFAULT_MAX_PLAYLISTS = 10

_PLAYLIST_ID_ON_PAGE_RE = re.compile(r'"playlistId":"([^"]+)"')


def extract_playlist_ids(body: str, max_playlists: int = DEFAULT_MAX_PLAYLISTS) -> list[str]:
    """Return unique playlist IDs from a results page, in page order."""
    seen: dict[str, None] = {}
    for match in _PLAYLIST_ID_ON_PAGE_RE.finditer(body):
        seen.setdefault(match.group(1), None)
    return list(seen)[:max_playlists]


async def find_playlists(
    client: PlaylistClient,
    text: str,
    options: RequestOptions | None = None,
    retries: int = 3,
    max_playlists: int = DEFAULT_MAX_PLAYLISTS,
) -> list[PlaylistResult]:
    """
    Search YouTube for playlists matching ``text`` and fetch each one.

    Parameters
    ----------
    client : PlaylistClient
        Client used for the results page and each playlist lookup.
    text : str
        Free-text search query.
    options : RequestOptions | None, optional
        Options applied to every playlist lookup.
    retries : int, optional
        Retry budget for each playlist lookup (default: 3).
    max_playlists : int, optional
        Maximum number of playlists to fetch (default: 10).

    Returns
    -------
    list[PlaylistResult]
        Playlists in search-result order; empty if the page is empty.

    Raises
    ------
    PlaylistSearchError
        If the search page or any playlist lookup fails.
    """
    url = SEARCH_URL_TEMPLATE.format(query=quote(text, safe=""))
    headers = build_headers(options.headers if options else None, client.settings)

    try:
        body = await client.transport.get_text(url, headers=headers)
        if not body:
            return []

        playlist_ids = extract_playlist_ids(body, max_playlists)
        logger.info("Found %d candidate playlists for %r", len(playlist_ids), text)

        playlists: list[PlaylistResult] = []
        for playlist_id in playlist_ids:
            playlists.append(await client.search(playlist_id, options, retries))
        return playlists
    except Exception as e:
        raise PlaylistSearchError(text) from e
