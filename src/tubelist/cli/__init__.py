"""
CLI interface module for tubelist.

Provides a Typer-based command-line interface for playlist lookup, query
resolution and free-text playlist discovery.
"""

from __future__ import annotations

__all__: list[str] = []
