"""Compose the full post-transform filename for a file."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import FileInfo
from .case import CaseStyle, SeparatorPolicy, convert_identifier
from .filtering import filter_parts


def target_name(
    file: FileInfo,
    style: CaseStyle,
    separators: SeparatorPolicy,
    filters: Iterable[str] = (),
) -> str:
    """Strip ``filters`` from the stem, re-case it, and reattach the extension."""
    base = filter_parts(file.stem, filters)
    return convert_identifier(base, style, separators) + file.suffix
