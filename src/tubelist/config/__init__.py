"""
Configuration management module for tubelist.

Handles application settings, environment variables, logging setup,
and request defaults sent to YouTube.
"""

from __future__ import annotations

__all__: list[str] = []
