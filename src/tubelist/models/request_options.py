"""
Request options for playlist lookups.

Models
------
HeaderBag
    Case-insensitive, order-preserving HTTP header mapping.
RequestOptions
    Caller-facing options accepted by ``PlaylistClient.search``.
EffectiveOptions
    Options after defaults are merged, carrying the mutable remaining-item
    counter shared by the first page and every continuation page.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tubelist.config.settings import Settings


class HeaderBag(MutableMapping[str, str]):
    """
    Ordered HTTP header mapping with case-insensitive keys.

    The lower-cased header name is the identity of an entry; the casing of
    the first key seen for that identity is kept for output.

    Examples
    --------
    >>> headers = HeaderBag({"User-Agent": "x"})
    >>> headers["user-agent"] = "y"
    >>> dict(headers)
    {'User-Agent': 'y'}
    """

    def __init__(self, initial: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: dict[str, tuple[str, str]] = {}
        if initial is not None:
            self.update(initial)

    def __getitem__(self, key: str) -> str:
        return self._entries[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        identity = key.lower()
        existing = self._entries.get(identity)
        original_key = existing[0] if existing is not None else key
        self._entries[identity] = (original_key, value)

    def __delitem__(self, key: str) -> None:
        del self._entries[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._entries

    def __repr__(self) -> str:
        return f"HeaderBag({dict(self)!r})"


class RequestOptions(BaseModel):
    """
    Options accepted by a playlist lookup.

    Attributes
    ----------
    limit : float
        Maximum number of items to collect. Anything that is not a positive
        number means unlimited (``math.inf``).
    gl : str | None
        Country override for the request (e.g. ``"DE"``).
    hl : str | None
        Interface language override (e.g. ``"de"``).
    utc_offset_minutes : int | None
        UTC offset sent in the innertube client context.
    headers : dict[str, str]
        Transport-level header overrides, merged case-insensitively with
        the default user agent and consent cookie.
    """

    model_config = ConfigDict(populate_by_name=True)

    limit: float = Field(default=math.inf)
    gl: str | None = None
    hl: str | None = None
    utc_offset_minutes: int | None = Field(default=None, alias="utcOffsetMinutes")
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("limit", mode="before")
    @classmethod
    def normalize_limit(cls, v: Any) -> float:
        """Fall back to unlimited for missing, non-numeric or non-positive limits."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return math.inf
        if math.isnan(v) or v <= 0:
            return math.inf
        return float(v)


@dataclass
class EffectiveOptions:
    """
    Options after defaults are applied for a single resolved playlist.

    Built once per top-level call and reused across retries. ``remaining``
    is decremented in place as items are collected and is never reset
    between attempts.
    """

    list_id: str
    remaining: float
    query: dict[str, str]
    headers: HeaderBag
    gl: str | None = None
    hl: str | None = None
    utc_offset_minutes: int | None = None

    def consume(self, count: int) -> None:
        """Decrement the remaining-item counter by ``count``."""
        self.remaining -= count

    def take(self, items: list[Any]) -> list[Any]:
        """Return at most ``remaining`` items from ``items``."""
        if math.isinf(self.remaining):
            return items
        return items[: max(int(self.remaining), 0)]


def build_headers(
    overrides: Mapping[str, str] | None, settings: Settings
) -> HeaderBag:
    """
    Merge caller header overrides with the default user agent and consent cookie.

    The user agent is only added when absent. The consent cookie is set
    when no cookie is given and appended to an existing cookie that does
    not already carry it.

    Examples
    --------
    >>> build_headers({"COOKIE": "a=b"}, settings)["cookie"]
    'a=b; SOCS=CAI'
    """
    headers = HeaderBag(overrides or {})
    if "user-agent" not in headers:
        headers["user-agent"] = settings.user_agent

    consent_name = settings.consent_cookie.split("=", 1)[0] + "="
    cookie = headers.get("cookie")
    if not cookie:
        headers["cookie"] = settings.consent_cookie
    elif consent_name not in cookie:
        headers["cookie"] = f"{cookie}; {settings.consent_cookie}"
    return headers


def build_effective_options(
    list_id: str,
    options: RequestOptions | None,
    settings: Settings,
) -> EffectiveOptions:
    """
    Merge caller options with defaults for a resolved playlist ID.

    Parameters
    ----------
    list_id : str
        Canonical playlist identifier.
    options : RequestOptions | None
        Caller options; ``None`` means all defaults.
    settings : Settings
        Application settings providing locale, user agent and cookie
        defaults.

    Returns
    -------
    EffectiveOptions
        Options with the page query built and headers normalized.

    Raises
    ------
    ValueError
        If ``list_id`` is empty.
    """
    if not list_id:
        raise ValueError("Playlist ID is mandatory!")

    options = options or RequestOptions()

    query = {"gl": settings.default_gl, "hl": settings.default_hl}
    if options.gl:
        query["gl"] = options.gl
    if options.hl:
        query["hl"] = options.hl
    query["list"] = list_id

    headers = build_headers(options.headers, settings)

    return EffectiveOptions(
        list_id=list_id,
        remaining=options.limit,
        query=query,
        headers=headers,
        gl=options.gl,
        hl=options.hl,
        utc_offset_minutes=options.utc_offset_minutes,
    )
