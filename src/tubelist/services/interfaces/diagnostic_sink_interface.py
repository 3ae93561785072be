"""
Abstract Base Class for diagnostic sinks.

When YouTube returns a page the pipeline cannot parse after every retry,
the raw body is handed to a diagnostic sink so that format drift can be
investigated after the fact.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class DiagnosticSinkInterface(ABC):
    """Abstract interface for persisting unparseable responses."""

    @abstractmethod
    def dump(self, body: str) -> Path | None:
        """
        Persist a raw response body and notify the operator.

        Implementations must not raise.

        Parameters
        ----------
        body : str
            The raw response text.

        Returns
        -------
        Path | None
            Location of the written artifact, or None if it could not be
            written.
        """
        pass
