"""Collect candidate files from a directory or a newline-separated list."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CannotReadFileError, InvalidDirectoryError
from .models import FileInfo

logger = logging.getLogger(__name__)


def collect_directory(cwd: Path) -> list[FileInfo]:
    """Return non-hidden regular files directly inside ``cwd``, sorted by name."""
    if not cwd.is_dir():
        raise InvalidDirectoryError(cwd)
    try:
        entries = list(cwd.iterdir())
    except OSError as exc:
        raise InvalidDirectoryError(cwd) from exc

    files = [
        FileInfo(path=entry, filename=entry.name)
        for entry in entries
        if not entry.name.startswith(".") and entry.is_file()
    ]
    files.sort(key=lambda info: info.filename)
    logger.debug("collected %d files from %s", len(files), cwd)
    return files


def collect_from_list(list_path: Path, cwd: Path) -> list[FileInfo]:
    """Return files named one per line in ``list_path``.

    A relative ``list_path`` is resolved against ``cwd``; every listed name
    is resolved against ``cwd`` too. Blank lines and names that do not exist
    are skipped.
    """
    resolved = list_path if list_path.is_absolute() else cwd / list_path
    try:
        content = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CannotReadFileError(resolved) from exc

    files: list[FileInfo] = []
    for raw_line in content.splitlines():
        filename = raw_line.strip()
        if not filename:
            continue
        path = cwd / filename
        if not path.exists():
            logger.info("skipping missing listed file %s", path)
            continue
        files.append(FileInfo(path=path, filename=filename))
    return files
