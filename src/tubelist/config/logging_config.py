"""
Logging setup for tubelist command-line runs.

Library code only obtains module loggers via ``logging.getLogger(__name__)``;
handlers are attached here, on the ``tubelist`` root logger, when the CLI
starts.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Configure the ``tubelist`` logger.

    Parameters
    ----------
    level : str, optional
        Log level name used when ``verbose`` is False (default: "INFO").
    log_file : Path | None, optional
        When given, log records are also written to this file. Parent
        directories are created if needed.
    verbose : bool, optional
        If True, force DEBUG level for detailed output (default False).

    Returns
    -------
    logging.Logger
        The configured ``tubelist`` logger.
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger("tubelist")
    root_logger.setLevel(log_level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Avoid stacking handlers when invoked repeatedly (e.g. under CliRunner)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger
