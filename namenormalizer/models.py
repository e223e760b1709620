"""Plain data records shared by the picker, collectors, and rename pass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileInfo:
    """One candidate file: its full path and the name shown to the user."""

    path: Path
    filename: str

    @property
    def stem(self) -> str:
        """Filename without its final extension (``a.tar.gz`` -> ``a.tar``)."""
        suffix = self.suffix
        if not suffix:
            return self.filename
        return self.filename[: -len(suffix)]

    @property
    def suffix(self) -> str:
        """Final extension including the leading dot, or ``""``."""
        return Path(self.filename).suffix


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a picker session handed back to the rename pass."""

    files: list[FileInfo]
    filters: list[str]


@dataclass(frozen=True)
class RenameResult:
    original: str
    renamed: str
    success: bool
    error: str | None = None
