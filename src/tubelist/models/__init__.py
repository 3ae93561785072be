"""
Data models for tubelist.

Pydantic models for playlist results and request options, plus the tagged
records used to decode raw innertube list entries.
"""

from __future__ import annotations

from tubelist.models.playlist import (
    InnertubeContext,
    ItemAuthor,
    ParsedResponseContext,
    PlaylistItem,
    PlaylistResult,
    Thumbnail,
)
from tubelist.models.renderers import RawItemRecord, RendererKind
from tubelist.models.request_options import (
    EffectiveOptions,
    HeaderBag,
    RequestOptions,
)

__all__ = [
    "EffectiveOptions",
    "HeaderBag",
    "InnertubeContext",
    "ItemAuthor",
    "ParsedResponseContext",
    "PlaylistItem",
    "PlaylistResult",
    "RawItemRecord",
    "RendererKind",
    "RequestOptions",
    "Thumbnail",
]
