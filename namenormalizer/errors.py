"""Exception types raised by namenormalizer.

User-facing failures derive from ``NameNormalizerError`` so the CLI can turn
them into a one-line exit message.
"""

from __future__ import annotations

from pathlib import Path


class NameNormalizerError(Exception):
    """Base class for expected, user-reportable failures."""


class CannotReadFileError(NameNormalizerError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read file list at: {self.path}")


class InvalidDirectoryError(NameNormalizerError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid directory: {self.path}")


class TerminalSessionError(NameNormalizerError):
    """Terminal attributes could not be read or restored."""


__all__ = [
    "NameNormalizerError",
    "CannotReadFileError",
    "InvalidDirectoryError",
    "TerminalSessionError",
]
