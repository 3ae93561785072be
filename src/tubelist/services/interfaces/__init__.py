"""
Service interfaces for tubelist.

Abstract base classes for the collaborators consumed by the playlist
pipeline, so tests and embedding applications can substitute their own
implementations.
"""

from __future__ import annotations

from .diagnostic_sink_interface import DiagnosticSinkInterface
from .transport_interface import TransportInterface

__all__ = ["DiagnosticSinkInterface", "TransportInterface"]
