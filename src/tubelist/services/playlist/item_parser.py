"""
Normalization of raw playlist entries into ``PlaylistItem`` models.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urljoin

from tubelist.models.playlist import ItemAuthor, PlaylistItem
from tubelist.models.renderers import RawItemRecord, RendererKind
from tubelist.services.playlist.text import extract_text

logger = logging.getLogger(__name__)

BASE_VIDEO_URL = "https://www.youtube.com/watch?v="
_LIVE_STYLE = "LIVE"


def _is_live(info: dict[str, Any]) -> bool:
    for overlay in info.get("thumbnailOverlays") or []:
        status = overlay.get("thumbnailOverlayTimeStatusRenderer")
        if status and status.get("style") == _LIVE_STYLE:
            return True
    return False


def _web_url(endpoint: dict[str, Any]) -> str:
    path = endpoint["commandMetadata"]["webCommandMetadata"]["url"]
    return urljoin(BASE_VIDEO_URL, path)


def best_thumbnail(thumbnails: list[dict[str, Any]]) -> dict[str, Any]:
    """Return the thumbnail variant with the greatest width."""
    return max(thumbnails, key=lambda t: t.get("width") or 0)


def parse_item(raw: Any) -> PlaylistItem | None:
    """
    Normalize one raw playlist entry.

    Only ``playlistVideoRenderer`` entries that have an author byline, are
    not upcoming premieres or streams, and are marked playable survive.

    Parameters
    ----------
    raw : Any
        A single-key renderer object from a video list.

    Returns
    -------
    PlaylistItem | None
        The normalized item, or None when the entry is filtered out.

    Raises
    ------
    KeyError, IndexError, ValueError
        If a playable entry is missing fields every video renderer carries;
        the caller treats this as a parse failure.
    """
    record = RawItemRecord.decode(raw)
    if record.kind is RendererKind.UNKNOWN:
        logger.debug("Skipping unknown renderer %s", record.key)
        return None
    if record.kind is not RendererKind.PLAYLIST_VIDEO:
        return None

    info = record.payload
    if (
        not info
        or not info.get("shortBylineText")
        or info.get("upcomingEventData")
        or not info.get("isPlayable")
    ):
        logger.debug("Skipping unplayable entry %s", info.get("videoId"))
        return None

    author_run = info["shortBylineText"]["runs"][0]
    author_endpoint = author_run["navigationEndpoint"]
    length_text = info.get("lengthText")

    return PlaylistItem(
        title=extract_text(info["title"]),
        id=info["videoId"],
        short_url=BASE_VIDEO_URL + info["videoId"],
        url=_web_url(info["navigationEndpoint"]),
        author=ItemAuthor(
            name=author_run["text"],
            url=_web_url(author_endpoint),
            channel_id=author_endpoint["browseEndpoint"]["browseId"],
        ),
        thumbnail=best_thumbnail(info["thumbnail"]["thumbnails"])["url"],
        is_live=_is_live(info),
        duration=extract_text(length_text) if length_text else None,
    )


def parse_items(raw_items: list[Any]) -> list[PlaylistItem]:
    """Normalize a raw video list, dropping filtered entries."""
    items: list[PlaylistItem] = []
    for raw in raw_items:
        item = parse_item(raw)
        if item is not None:
            items.append(item)
    return items
