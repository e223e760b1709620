"""Inline highlighting of filter matches inside filenames."""

from __future__ import annotations

from collections.abc import Iterable

from ..naming.filtering import fold, match_at
from ..ui_theme import DEFAULT_THEME, UITheme


def match_marks(text: str, parts: Iterable[str]) -> list[bool]:
    """Return one flag per character of ``text`` covered by a filter match.

    Each non-empty part is scanned case-insensitively; after a hit the scan
    resumes past the match, so hits of one part never overlap. Hits of
    different parts may overlap and simply mark the same positions.
    """
    marks = [False] * len(text)
    folded = fold(text)
    for part in parts:
        if not part:
            continue
        needle = fold(part)
        size = len(needle)
        i = 0
        while i + size <= len(folded):
            if match_at(folded, needle, i):
                for pos in range(i, i + size):
                    marks[pos] = True
                i += size
            else:
                i += 1
    return marks


def highlight_matches(
    text: str,
    parts: Iterable[str],
    *,
    is_current: bool,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Wrap each contiguous matched span of ``text`` in SGR decoration.

    The cursor row is already drawn in inverse video, so its spans are
    underlined; other rows use the theme's match colour. Every span is
    closed before the next unmatched character or at end of string.
    """
    parts = [part for part in parts if part]
    if not parts:
        return text
    if is_current:
        span_on, span_off = theme.current_match, theme.current_match_off
    else:
        span_on, span_off = theme.match, theme.match_off

    marks = match_marks(text, parts)
    out: list[str] = []
    in_span = False
    for ch, marked in zip(text, marks):
        if marked and not in_span:
            out.append(span_on)
            in_span = True
        elif not marked and in_span:
            out.append(span_off)
            in_span = False
        out.append(ch)
    if in_span:
        out.append(span_off)
    return "".join(out)
