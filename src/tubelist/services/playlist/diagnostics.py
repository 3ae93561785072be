"""
File-based diagnostic sink for unparseable playlist responses.
"""

from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from tubelist.services.interfaces import DiagnosticSinkInterface

logger = logging.getLogger(__name__)


class FileDiagnosticSink(DiagnosticSinkInterface):
    """
    Write raw responses to ``<dumps_dir>/<random>-<epoch_ms>.txt``.

    After writing, a notice asking the operator to report the dump is
    printed to stderr.

    Parameters
    ----------
    dumps_dir : Path
        Directory for dump files; created on first use.
    support_url : str
        Where operators should report dumps.
    console : Console | None, optional
        Rich console for the notice (default: a stderr console).
    """

    def __init__(
        self,
        dumps_dir: Path,
        support_url: str,
        console: Console | None = None,
    ) -> None:
        self.dumps_dir = dumps_dir
        self.support_url = support_url
        self._console = console or Console(stderr=True)

    def _dump_path(self) -> Path:
        return self.dumps_dir / f"{uuid.uuid4().hex[:10]}-{int(time.time() * 1000)}.txt"

    def dump(self, body: str) -> Path | None:
        """
        Write ``body`` to a new dump file; returns None if writing failed.

        Characters UTF-8 cannot encode, such as lone surrogates, are written
        as backslash escapes.
        """
        try:
            self.dumps_dir.mkdir(parents=True, exist_ok=True)
            path = self._dump_path()
            path.write_text(body, encoding="utf-8", errors="backslashreplace")
        except OSError as e:
            logger.error(
                "Failed to write diagnostic dump to %s: %s: %s",
                self.dumps_dir,
                type(e).__name__,
                e,
            )
            return None

        logger.warning("Unsupported playlist response dumped to %s", path)
        self._console.print(
            Panel(
                "[yellow]Unsupported YouTube playlist response.[/yellow]\n\n"
                f"Please post the files in [bold]{self.dumps_dir.resolve()}[/bold] "
                f"to {self.support_url}. Thanks!",
                title="Diagnostic dump",
                border_style="red",
            )
        )
        return path
