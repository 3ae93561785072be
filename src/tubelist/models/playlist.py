"""
Pydantic models for playlist extraction.

Models
------
Thumbnail
    A single thumbnail variant offered by YouTube.
ItemAuthor
    Channel that uploaded a playlist item.
PlaylistItem
    A normalized, playable playlist entry.
PlaylistResult
    Playlist metadata plus the collected items.
ClientContext, InnertubeContext
    Request context sent with innertube API calls.
ParsedResponseContext
    Values co-extracted from a playlist page.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tubelist.models.youtube_types import VideoId


class Thumbnail(BaseModel):
    """A thumbnail variant; ``width`` selects the best one."""

    url: str
    width: int = 0
    height: int = 0


class ItemAuthor(BaseModel):
    """
    Channel that uploaded a playlist item.

    Attributes
    ----------
    name : str
        Channel display name.
    url : str
        Absolute channel URL.
    channel_id : str
        Channel browse ID (usually ``UC...``).
    """

    name: str
    url: str
    channel_id: str


class PlaylistItem(BaseModel):
    """
    A normalized, playable playlist entry.

    Attributes
    ----------
    title : str
        Video title.
    id : str
        YouTube video ID.
    short_url : str
        ``https://www.youtube.com/watch?v=<id>``.
    url : str
        Full watch URL including the playlist context.
    author : ItemAuthor
        Uploading channel.
    thumbnail : str
        URL of the widest thumbnail variant.
    is_live : bool
        Whether the item is a live stream.
    duration : str | None
        Display duration (e.g. ``"3:32"``); None when YouTube gives no
        length text, as for live streams.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    id: VideoId
    short_url: str
    url: str
    author: ItemAuthor
    thumbnail: str
    is_live: bool = False
    duration: str | None = None


class PlaylistResult(BaseModel):
    """
    Playlist metadata plus the collected items.

    ``views`` is only populated when the sidebar exposes exactly three stat
    entries; playlists without a view-count stat report 0.
    """

    id: str
    url: str
    title: str
    thumbnail: Thumbnail | None = None
    total_items: int = 0
    views: int = 0
    items: list[PlaylistItem] = Field(default_factory=list)


class ClientContext(BaseModel):
    """Innertube ``client`` context block."""

    model_config = ConfigDict(populate_by_name=True)

    utc_offset_minutes: int = Field(default=-300, alias="utcOffsetMinutes")
    gl: str = "US"
    hl: str = "en"
    client_name: str = Field(default="WEB", alias="clientName")
    client_version: str = Field(default="", alias="clientVersion")


class InnertubeContext(BaseModel):
    """Request context sent verbatim with every innertube API call."""

    client: ClientContext = Field(default_factory=ClientContext)
    user: dict[str, Any] = Field(default_factory=dict)
    request: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the camelCase keys innertube expects."""
        return self.model_dump(by_alias=True)


class ParsedResponseContext(BaseModel):
    """
    Values co-extracted from a playlist page.

    Attributes
    ----------
    json_data : dict[str, Any] | None
        Decoded ``ytInitialData``; None when no strategy recovered it. May
        be filled later by the fallback browse call.
    api_key : str
        Innertube API key, or empty string.
    context : InnertubeContext
        Request context for follow-up API calls.
    """

    json_data: dict[str, Any] | None = None
    api_key: str = ""
    context: InnertubeContext = Field(default_factory=InnertubeContext)

    @property
    def client_version(self) -> str:
        """Client version discovered on the page, or empty string."""
        return self.context.client.client_version
