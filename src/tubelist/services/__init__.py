"""
Services module for tubelist.

Contains the HTTP transport, collaborator interfaces, and the playlist
extraction pipeline.
"""

from __future__ import annotations

from tubelist.services.http_client import HttpxTransport

__all__: list[str] = ["HttpxTransport"]
