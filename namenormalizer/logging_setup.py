"""Logging configuration for the CLI.

The picker owns the terminal while it runs, so records never go to stderr:
they are written to a file when one is requested and dropped otherwise.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_ENV_VAR = "NAMENORMALIZER_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_file(cli_value: str | None) -> Path | None:
    """Return the log file path from ``--log-file`` or the environment."""
    raw = cli_value if cli_value else os.environ.get(LOG_ENV_VAR, "")
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def configure_logging(log_file: Path | None, verbose: bool = False) -> logging.Logger:
    """Attach a single handler to the package logger and return it.

    Repeated calls replace the previously attached handler so tests and
    re-entrant CLI invocations do not accumulate handlers.
    """
    logger = logging.getLogger("namenormalizer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger
