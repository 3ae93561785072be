"""
YouTube playlist extraction services.

This package resolves playlist queries and extracts playlist metadata and
items from YouTube's web pages and innertube API.

The extraction process includes:
- Query resolution (playlist IDs, channel IDs, channel links)
- Embedded ``ytInitialData`` parsing with a direct browse fallback
- Item normalization with unplayable/upcoming filtering
- Continuation-token pagination bounded by an item limit
- Diagnostic dumps of unparseable pages

Modules
-------
resolver
    Query to canonical playlist ID resolution
page_parser
    Embedded state, API key and client version extraction
item_parser
    Raw renderer to ``PlaylistItem`` normalization
continuation
    Continuation page walker
orchestrator
    ``PlaylistClient`` and the top-level ``search``
discovery
    Free-text playlist search
diagnostics
    File-based diagnostic sink
"""

from tubelist.services.playlist.continuation import fetch_continuation_page
from tubelist.services.playlist.diagnostics import FileDiagnosticSink
from tubelist.services.playlist.discovery import find_playlists
from tubelist.services.playlist.item_parser import parse_item
from tubelist.services.playlist.orchestrator import PlaylistClient, search
from tubelist.services.playlist.page_parser import parse_body
from tubelist.services.playlist.resolver import (
    is_valid_playlist_query,
    resolve_playlist_id,
)
from tubelist.services.playlist.text import extract_number, extract_text

__all__ = [
    "FileDiagnosticSink",
    "PlaylistClient",
    "extract_number",
    "extract_text",
    "fetch_continuation_page",
    "find_playlists",
    "is_valid_playlist_query",
    "parse_body",
    "parse_item",
    "resolve_playlist_id",
    "search",
]
