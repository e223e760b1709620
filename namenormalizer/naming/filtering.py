"""Case-insensitive substring removal."""

from __future__ import annotations

from collections.abc import Iterable


def match_at(folded: list[str], needle: list[str], start: int) -> bool:
    """Return whether ``needle`` occurs in ``folded`` starting at ``start``.

    Both sequences hold one lowercased string per original character, so
    positions line up with the unfolded text even when lowercasing a
    character yields more than one code point.
    """
    end = start + len(needle)
    if end > len(folded):
        return False
    return folded[start:end] == needle


def fold(text: str) -> list[str]:
    return [ch.lower() for ch in text]


def _remove_part(name: str, part: str) -> str:
    folded = fold(name)
    needle = fold(part)
    size = len(needle)
    out: list[str] = []
    i = 0
    while i < len(name):
        if match_at(folded, needle, i):
            i += size
            continue
        out.append(name[i])
        i += 1
    return "".join(out)


def filter_parts(name: str, parts: Iterable[str] = ()) -> str:
    """Remove each of ``parts`` from ``name`` in order, ignoring case.

    Unmatched characters keep their original case.

    >>> filter_parts("MyFileName_TEST", ["file", "test"])
    'MyName_'
    """
    result = name
    for part in parts:
        if part:
            result = _remove_part(result, part)
    return result
