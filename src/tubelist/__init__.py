"""
tubelist - YouTube playlist metadata scraper.

Resolves playlist URLs, IDs and channel references to canonical playlist
identifiers and extracts playlist metadata and items from the public
YouTube web pages and the innertube browse API.
"""

from __future__ import annotations

__version__ = "0.4.0"
__author__ = "tubelist"
__email__ = "noreply@tubelist.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
