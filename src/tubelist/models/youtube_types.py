"""
Custom validated types for YouTube identifiers.

Provides the identifier patterns used when resolving playlist queries, and
a strongly-typed video ID wrapper for use in item models.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BeforeValidator, Field

# Standard (PL), favorites (FL), uploads (UU), liked (LL) and radio-mix (RD) lists
PLAYLIST_ID_RE = re.compile(r"^(FL|PL|UU|LL|RD)[a-zA-Z0-9-_]{16,41}$")
ALBUM_ID_RE = re.compile(r"^OLAK5uy_[a-zA-Z0-9-_]{33}$")
CHANNEL_ID_RE = re.compile(r"^UC[a-zA-Z0-9-_]{22,32}$")
VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")

MIX_PREFIX = "RD"
UPLOADS_PREFIX = "UU"


def is_playlist_id(value: str) -> bool:
    """Return True if ``value`` is a playlist or album identifier."""
    return bool(PLAYLIST_ID_RE.fullmatch(value) or ALBUM_ID_RE.fullmatch(value))


def is_channel_id(value: str) -> bool:
    """Return True if ``value`` is a bare channel identifier."""
    return bool(CHANNEL_ID_RE.fullmatch(value))


def channel_to_uploads_id(channel_id: str) -> str:
    """
    Derive the uploads playlist ID of a channel.

    Parameters
    ----------
    channel_id : str
        Channel ID starting with ``UC``.

    Returns
    -------
    str
        The same ID with its first two characters replaced by ``UU``.

    Examples
    --------
    >>> channel_to_uploads_id("UCuAXFkgsw1L7xaCfnd5JJOw")
    'UUuAXFkgsw1L7xaCfnd5JJOw'
    """
    return UPLOADS_PREFIX + channel_id[2:]


def validate_video_id(v: str) -> str:
    """Validate YouTube Video ID format."""
    if not isinstance(v, str):
        raise TypeError("VideoId must be a string")

    if len(v) != 11:
        raise ValueError(
            f"VideoId must be exactly 11 characters long, got {len(v)}: {v}"
        )

    if not VIDEO_ID_RE.fullmatch(v):
        raise ValueError(f"VideoId contains invalid characters: {v}")

    return v


# Type aliases for use in Pydantic models
VideoId = Annotated[
    str,
    BeforeValidator(validate_video_id),
    Field(description="YouTube Video ID (11 chars, alphanumeric)"),
]
