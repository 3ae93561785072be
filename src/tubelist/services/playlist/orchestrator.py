"""
Playlist lookup orchestration.

Coordinates the full pipeline for a single playlist query:

1. Resolve the query to a canonical playlist ID
2. Fetch the playlist page and parse its embedded state
3. Fall back to a direct innertube browse call when no state was embedded
4. Extract sidebar metadata and the first batch of items
5. Walk continuation tokens for the remaining items

Parse-shape failures (missing state, errors while extracting sidebar or list
data) are retried up to the configured budget with no delay. When the budget
is exhausted the raw page is handed to the diagnostic sink before raising.
Validation failures and YouTube's own error alerts are never retried.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

from tubelist.config.settings import Settings
from tubelist.config.settings import settings as default_settings
from tubelist.exceptions import (
    EmptyPlaylistError,
    PlaylistAlertError,
    PlaylistParseError,
    UnknownPlaylistError,
    UnsupportedPlaylistError,
)
from tubelist.models.playlist import ParsedResponseContext, PlaylistResult, Thumbnail
from tubelist.models.renderers import find_continuation_token
from tubelist.models.request_options import (
    EffectiveOptions,
    RequestOptions,
    build_effective_options,
    build_headers,
)
from tubelist.services.http_client import HttpxTransport
from tubelist.services.interfaces import DiagnosticSinkInterface, TransportInterface
from tubelist.services.playlist.continuation import (
    BASE_API_URL,
    fetch_continuation_page,
)
from tubelist.services.playlist.diagnostics import FileDiagnosticSink
from tubelist.services.playlist.item_parser import best_thumbnail, parse_items
from tubelist.services.playlist.page_parser import between, parse_body
from tubelist.services.playlist.resolver import BASE_PLAYLIST_URL, resolve_playlist_id
from tubelist.services.playlist.text import extract_number, extract_text

logger = logging.getLogger(__name__)

_BROWSE_ID_LEFT = '"key":"browse_id","value":"'
_ALERT_ERROR_TYPE = "ERROR"


def _find_renderer(entries: list[Any], key: str) -> dict[str, Any] | None:
    """Return the body of the first single-key entry named ``key``."""
    for entry in entries or []:
        if isinstance(entry, dict) and entry and next(iter(entry)) == key:
            return entry[key]
    return None


def _require_renderer(entries: list[Any], key: str) -> dict[str, Any]:
    renderer = _find_renderer(entries, key)
    if renderer is None:
        raise PlaylistParseError(f"Missing {key} in playlist data", renderer=key)
    return renderer


class PlaylistClient:
    """
    Fetches playlist metadata and items from YouTube.

    Parameters
    ----------
    transport : TransportInterface | None, optional
        HTTP transport (default: ``HttpxTransport`` with the configured
        timeout).
    diagnostic_sink : DiagnosticSinkInterface | None, optional
        Receives raw pages that could not be parsed after all retries
        (default: ``FileDiagnosticSink`` writing to ``settings.dumps_dir``).
    settings : Settings | None, optional
        Application settings (default: the global settings instance).

    Examples
    --------
    >>> client = PlaylistClient()
    >>> result = await client.search("PLRBp0Fe2GpgmsW46rJyudVFlY6IYjFBIK",
    ...                              RequestOptions(limit=50))
    >>> print(result.title, len(result.items))
    """

    def __init__(
        self,
        transport: TransportInterface | None = None,
        diagnostic_sink: DiagnosticSinkInterface | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._transport = transport or HttpxTransport(
            timeout=self._settings.request_timeout
        )
        self._sink = diagnostic_sink or FileDiagnosticSink(
            dumps_dir=self._settings.dumps_dir,
            support_url=self._settings.support_url,
        )

    @property
    def transport(self) -> TransportInterface:
        """The HTTP transport used by this client."""
        return self._transport

    @property
    def settings(self) -> Settings:
        """Settings this client was built with."""
        return self._settings

    async def resolve_playlist_id(
        self, query: object, options: RequestOptions | None = None
    ) -> str:
        """Resolve ``query`` to a canonical playlist ID (see ``resolver``)."""
        headers = build_headers(options.headers if options else None, self._settings)
        return await resolve_playlist_id(query, self._transport, headers=headers)

    async def search(
        self,
        query: object,
        options: RequestOptions | None = None,
        retries: int | None = None,
    ) -> PlaylistResult:
        """
        Fetch a playlist's metadata and items.

        Parameters
        ----------
        query : object
            Playlist URL or ID, channel ID, or channel link.
        options : RequestOptions | None, optional
            Item limit, locale overrides and header overrides.
        retries : int | None, optional
            Retry budget for parse-shape failures (default:
            ``settings.retry_attempts``).

        Returns
        -------
        PlaylistResult
            Playlist metadata with at most ``options.limit`` items.

        Raises
        ------
        InvalidQueryError
            If the query is not a recognizable playlist reference.
        UnresolvableReferenceError
            If a channel link's page carries no channel ID.
        UnknownPlaylistError
            If the page has no sidebar section.
        PlaylistAlertError
            If YouTube reports an error alert (private or deleted playlist).
        UnsupportedPlaylistError
            If no playlist data was recovered after all retries.
        EmptyPlaylistError
            If the item list section is missing after all retries.
        NetworkError
            If the playlist page cannot be fetched.
        """
        retries_left = self._settings.retry_attempts if retries is None else retries

        list_id = await self.resolve_playlist_id(query, options)
        effective = build_effective_options(list_id, options, self._settings)
        page_url = BASE_PLAYLIST_URL + urlencode(effective.query)

        while True:
            body = await self._transport.get_text(page_url, headers=effective.headers)
            parsed = parse_body(body, effective)

            if parsed.json_data is None:
                await self._fallback_browse(body, parsed, effective)

            data = parsed.json_data
            if data is None:
                if retries_left <= 0:
                    dump_path = self._sink.dump(body)
                    raise UnsupportedPlaylistError(dump_path=dump_path)
                retries_left -= 1
                logger.warning(
                    "No playlist data recovered for %s, retrying (%d retries left)",
                    list_id,
                    retries_left,
                )
                continue

            if not data.get("sidebar"):
                raise UnknownPlaylistError(list_id=list_id)

            self._raise_for_alert(data)

            try:
                return await self._assemble(data, parsed, effective)
            except Exception as e:
                if retries_left <= 0:
                    self._sink.dump(body)
                    raise
                retries_left -= 1
                logger.warning(
                    "Failed to extract playlist %s (%s: %s), retrying (%d retries left)",
                    list_id,
                    type(e).__name__,
                    e,
                    retries_left,
                )

    async def _fallback_browse(
        self,
        body: str,
        parsed: ParsedResponseContext,
        effective: EffectiveOptions,
    ) -> None:
        """
        Request the playlist directly from the innertube browse endpoint.

        Best effort: any failure leaves ``parsed.json_data`` as None so the
        retry logic decides what happens next.
        """
        browse_id = between(body, _BROWSE_ID_LEFT, '"') or f"VL{effective.list_id}"
        if not parsed.api_key or not parsed.client_version:
            logger.debug("Skipping browse fallback for %s: missing api key", browse_id)
            return

        try:
            response = await self._transport.post_json(
                BASE_API_URL + parsed.api_key,
                {"context": parsed.context.to_payload(), "browseId": browse_id},
                headers=effective.headers,
            )
        except Exception as e:
            logger.debug(
                "Browse fallback for %s failed: %s: %s",
                browse_id,
                type(e).__name__,
                e,
            )
            return

        if isinstance(response, dict):
            parsed.json_data = response

    def _raise_for_alert(self, data: dict[str, Any]) -> None:
        if not data.get("alerts") or data.get("contents"):
            return
        for alert in data["alerts"]:
            renderer = alert.get("alertRenderer") if isinstance(alert, dict) else None
            if renderer and renderer.get("type") == _ALERT_ERROR_TYPE:
                raise PlaylistAlertError(extract_text(renderer.get("text")))

    async def _assemble(
        self,
        data: dict[str, Any],
        parsed: ParsedResponseContext,
        effective: EffectiveOptions,
    ) -> PlaylistResult:
        info = _require_renderer(
            data["sidebar"]["playlistSidebarRenderer"]["items"],
            "playlistSidebarPrimaryInfoRenderer",
        )

        thumbnail_renderer = info["thumbnailRenderer"]
        thumbnail_body = thumbnail_renderer.get(
            "playlistVideoThumbnailRenderer"
        ) or thumbnail_renderer.get("playlistCustomThumbnailRenderer")
        thumbnail = Thumbnail(**best_thumbnail(thumbnail_body["thumbnail"]["thumbnails"]))

        stats = info["stats"]
        result = PlaylistResult(
            id=effective.list_id,
            url=f"{BASE_PLAYLIST_URL}list={effective.list_id}",
            title=extract_text(info["title"]),
            thumbnail=thumbnail,
            total_items=extract_number(stats[0]) or 0,
            views=(extract_number(stats[1]) or 0) if len(stats) == 3 else 0,
        )

        sections = data["contents"]["twoColumnBrowseResultsRenderer"]["tabs"][0][
            "tabRenderer"
        ]["content"]["sectionListRenderer"]["contents"]
        item_section = _find_renderer(sections, "itemSectionRenderer")
        if item_section is None:
            raise EmptyPlaylistError()

        video_list = _find_renderer(item_section["contents"], "playlistVideoListRenderer")
        if video_list is None:
            raise EmptyPlaylistError()

        raw_items = video_list.get("contents") or []
        items = effective.take(parse_items(raw_items))
        effective.consume(len(items))
        result.items = items
        logger.debug(
            "Playlist %s: %d items on first page (remaining limit %s)",
            effective.list_id,
            len(items),
            effective.remaining,
        )

        token = find_continuation_token(raw_items)
        if not token or effective.remaining < 1:
            return result

        result.items.extend(
            await fetch_continuation_page(
                parsed.api_key,
                token,
                parsed.context,
                effective,
                self._transport,
            )
        )
        return result


async def search(
    query: object,
    options: RequestOptions | None = None,
    retries: int = 3,
    transport: TransportInterface | None = None,
    diagnostic_sink: DiagnosticSinkInterface | None = None,
) -> PlaylistResult:
    """Convenience wrapper around ``PlaylistClient(...).search``."""
    client = PlaylistClient(transport=transport, diagnostic_sink=diagnostic_sink)
    return await client.search(query, options, retries)
