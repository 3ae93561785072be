"""
Pytest configuration and fixtures for tubelist tests.

Provides:
- An isolated ``Settings`` instance writing dumps to a temporary directory
- ``FakeTransport``, a scripted ``TransportInterface`` that records calls
- ``FakeSink``, a ``DiagnosticSinkInterface`` that records dumped bodies
- Factory fixtures building realistic innertube renderer payloads and
  playlist pages
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from tubelist.config.settings import Settings
from tubelist.services.interfaces import DiagnosticSinkInterface, TransportInterface

PLAYLIST_ID = "PLRBp0Fe2GpgmsW46rJyudVFlY6IYjFBIK"
CHANNEL_ID = "UCuAXFkgsw1L7xaCfnd5JJOw"
API_KEY = "AIzaSyTestKey"
CLIENT_VERSION = "2.20210101.00.00"


# ============================================================================
# Collaborator fakes
# ============================================================================


class FakeTransport(TransportInterface):
    """
    Scripted transport.

    ``pages`` and ``posts`` are consumed in order; the last entry repeats
    once the script runs out. Entries that are exceptions are raised.
    """

    def __init__(
        self,
        pages: list[Any] | None = None,
        posts: list[Any] | None = None,
    ) -> None:
        self.pages = list(pages or [""])
        self.posts = list(posts or [{}])
        self.get_calls: list[tuple[str, dict[str, str]]] = []
        self.post_calls: list[tuple[str, dict[str, Any], dict[str, str]]] = []

    @staticmethod
    def _next(script: list[Any]) -> Any:
        entry = script.pop(0) if len(script) > 1 else script[0]
        if isinstance(entry, Exception):
            raise entry
        return entry

    async def get_text(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> str:
        self.get_calls.append((url, dict(headers or {})))
        return self._next(self.pages)

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        self.post_calls.append((url, payload, dict(headers or {})))
        return self._next(self.posts)


class FakeSink(DiagnosticSinkInterface):
    """Records dumped bodies instead of writing files."""

    def __init__(self) -> None:
        self.bodies: list[str] = []

    def dump(self, body: str) -> Path | None:
        self.bodies.append(body)
        return Path(f"/tmp/dumps/fake-{len(self.bodies)}.txt")


# ============================================================================
# Settings and collaborators
# ============================================================================


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        dumps_dir=tmp_path / "dumps",
        logs_dir=tmp_path / "logs",
        retry_attempts=3,
    )


@pytest.fixture
def fake_sink() -> FakeSink:
    return FakeSink()


# ============================================================================
# Innertube payload factories
# ============================================================================


def _video_renderer(
    video_id: str = "dQw4w9WgXcQ",
    title: str = "Never Gonna Give You Up",
    author: str = "Rick Astley",
    playable: bool = True,
    upcoming: bool = False,
    live: bool = False,
    with_byline: bool = True,
    length: str | None = "3:33",
) -> dict[str, Any]:
    info: dict[str, Any] = {
        "videoId": video_id,
        "title": {"runs": [{"text": title}]},
        "navigationEndpoint": {
            "commandMetadata": {
                "webCommandMetadata": {
                    "url": f"/watch?v={video_id}&list={PLAYLIST_ID}&index=1"
                }
            }
        },
        "thumbnail": {
            "thumbnails": [
                {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg", "width": 168, "height": 94},
                {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg", "width": 336, "height": 188},
                {"url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg", "width": 246, "height": 138},
            ]
        },
        "isPlayable": playable,
        "thumbnailOverlays": [
            {
                "thumbnailOverlayTimeStatusRenderer": {
                    "style": "LIVE" if live else "DEFAULT",
                }
            }
        ],
    }
    if with_byline:
        info["shortBylineText"] = {
            "runs": [
                {
                    "text": author,
                    "navigationEndpoint": {
                        "commandMetadata": {
                            "webCommandMetadata": {"url": f"/channel/{CHANNEL_ID}"}
                        },
                        "browseEndpoint": {"browseId": CHANNEL_ID},
                    },
                }
            ]
        }
    if upcoming:
        info["upcomingEventData"] = {"startTime": "1700000000"}
    if length is not None:
        info["lengthText"] = {"simpleText": length}
    return {"playlistVideoRenderer": info}


def _continuation_renderer(token: str) -> dict[str, Any]:
    return {
        "continuationItemRenderer": {
            "trigger": "CONTINUATION_TRIGGER_ON_ITEM_SHOWN",
            "continuationEndpoint": {"continuationCommand": {"token": token}},
        }
    }


def _continuation_response(items: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "onResponseReceivedActions": [
            {"appendContinuationItemsAction": {"continuationItems": items}}
        ]
    }


def _sidebar(
    title: str = "Test Playlist",
    stats: list[dict[str, Any]] | None = None,
    custom_thumbnail: bool = False,
) -> dict[str, Any]:
    if stats is None:
        stats = [
            {"runs": [{"text": "2"}, {"text": " videos"}]},
            {"simpleText": "1,234 views"},
            {"runs": [{"text": "Updated today"}]},
        ]
    thumbnail_key = (
        "playlistCustomThumbnailRenderer" if custom_thumbnail else "playlistVideoThumbnailRenderer"
    )
    return {
        "playlistSidebarRenderer": {
            "items": [
                {
                    "playlistSidebarPrimaryInfoRenderer": {
                        "title": {"runs": [{"text": title}]},
                        "thumbnailRenderer": {
                            thumbnail_key: {
                                "thumbnail": {
                                    "thumbnails": [
                                        {"url": "https://i.ytimg.com/pl/small.jpg", "width": 120, "height": 90},
                                        {"url": "https://i.ytimg.com/pl/large.jpg", "width": 480, "height": 360},
                                    ]
                                }
                            }
                        },
                        "stats": stats,
                    }
                },
                {"playlistSidebarSecondaryInfoRenderer": {}},
            ]
        }
    }


def _contents(items: list[dict[str, Any]] | None) -> dict[str, Any]:
    section_contents: list[dict[str, Any]] = []
    if items is not None:
        section_contents.append(
            {
                "itemSectionRenderer": {
                    "contents": [{"playlistVideoListRenderer": {"contents": items}}]
                }
            }
        )
    return {
        "twoColumnBrowseResultsRenderer": {
            "tabs": [
                {
                    "tabRenderer": {
                        "content": {"sectionListRenderer": {"contents": section_contents}}
                    }
                }
            ]
        }
    }


def _initial_data(
    items: list[dict[str, Any]] | None = None,
    title: str = "Test Playlist",
    stats: list[dict[str, Any]] | None = None,
    custom_thumbnail: bool = False,
) -> dict[str, Any]:
    return {
        "sidebar": _sidebar(title=title, stats=stats, custom_thumbnail=custom_thumbnail),
        "contents": _contents(items),
    }


def _page(
    data: dict[str, Any] | None,
    api_key: str = API_KEY,
    client_version: str = CLIENT_VERSION,
    window_style: bool = False,
    extra: str = "",
) -> str:
    config = (
        f'<script>ytcfg.set({{"INNERTUBE_API_KEY":"{api_key}",'
        f'"INNERTUBE_CONTEXT_CLIENT_VERSION":"{client_version}"}});</script>'
    )
    state = ""
    if data is not None:
        prefix = 'window["ytInitialData"] = ' if window_style else "var ytInitialData = "
        state = f"<script>{prefix}{json.dumps(data)};</script>"
    return f"<html><head>{config}</head><body>{extra}{state}</body></html>"


@pytest.fixture
def make_video_renderer() -> Callable[..., dict[str, Any]]:
    return _video_renderer


@pytest.fixture
def make_continuation_renderer() -> Callable[[str], dict[str, Any]]:
    return _continuation_renderer


@pytest.fixture
def make_continuation_response() -> Callable[..., dict[str, Any]]:
    return _continuation_response


@pytest.fixture
def make_initial_data() -> Callable[..., dict[str, Any]]:
    return _initial_data


@pytest.fixture
def make_page() -> Callable[..., str]:
    return _page


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    return FakeTransport
