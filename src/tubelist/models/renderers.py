"""
Tagged records for raw innertube list entries.

Each entry in a playlist video list is a JSON object whose single top-level
key names the renderer that produced it, e.g.
``{"playlistVideoRenderer": {...}}``. ``RawItemRecord.decode`` reads that key
and maps it onto ``RendererKind``; unrecognized renderers decode to
``RendererKind.UNKNOWN`` and are ignored downstream.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RendererKind(str, Enum):
    """Renderer kinds that can appear in a playlist video list."""

    PLAYLIST_VIDEO = "playlistVideoRenderer"
    CONTINUATION = "continuationItemRenderer"
    UNKNOWN = "unknown"

    @classmethod
    def from_key(cls, key: str | None) -> RendererKind:
        """Map a renderer key to its kind, failing closed to ``UNKNOWN``."""
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == key:
                return kind
        return cls.UNKNOWN


@dataclass(frozen=True)
class RawItemRecord:
    """
    One entry of a playlist video list, tagged by renderer kind.

    Attributes
    ----------
    kind : RendererKind
        Renderer kind decoded from the entry's key.
    key : str | None
        The raw renderer key, kept for logging unknown kinds.
    payload : dict[str, Any]
        The renderer body.
    """

    kind: RendererKind
    key: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def decode(cls, raw: Any) -> RawItemRecord:
        """
        Decode a raw list entry by its first key.

        Parameters
        ----------
        raw : Any
            A JSON value from the video list.

        Returns
        -------
        RawItemRecord
            The tagged record; non-dict or empty input decodes to
            ``RendererKind.UNKNOWN`` with an empty payload.
        """
        if not isinstance(raw, dict) or not raw:
            return cls(kind=RendererKind.UNKNOWN)

        key = next(iter(raw))
        payload = raw[key]
        return cls(
            kind=RendererKind.from_key(key),
            key=key,
            payload=payload if isinstance(payload, dict) else {},
        )

    @property
    def continuation_token(self) -> str | None:
        """Continuation token carried by a continuation marker, if any."""
        if self.kind is not RendererKind.CONTINUATION:
            return None
        token = (
            self.payload.get("continuationEndpoint", {})
            .get("continuationCommand", {})
            .get("token")
        )
        return token or None


def find_continuation_token(raw_items: list[Any]) -> str | None:
    """
    Return the token of the first continuation marker in a raw item list.

    Parameters
    ----------
    raw_items : list[Any]
        Raw renderer entries of a video list or continuation page.

    Returns
    -------
    str | None
        The continuation token, or None if the list carries no marker.
    """
    for raw in raw_items:
        record = RawItemRecord.decode(raw)
        if record.kind is RendererKind.CONTINUATION:
            return record.continuation_token
    return None
