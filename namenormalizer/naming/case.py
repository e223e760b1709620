"""Identifier case conversion.

Names are split into words on separator characters (chosen by a
``SeparatorPolicy``) and on case boundaries, then re-joined in the requested
``CaseStyle``.
"""

from __future__ import annotations

from enum import Enum


class CaseStyle(str, Enum):
    SNAKE = "snake"
    CAMEL = "camel"
    PASCAL = "pascal"


class SeparatorPolicy(str, Enum):
    COMMON_WITH_DOT = "commonWithDot"
    COMMON_NO_DOT = "commonNoDot"
    WHITESPACE_ONLY = "whitespaceOnly"

    def is_separator(self, ch: str) -> bool:
        if ch.isspace():
            return True
        if self is SeparatorPolicy.WHITESPACE_ONLY:
            return False
        if ch in "_-":
            return True
        return self is SeparatorPolicy.COMMON_WITH_DOT and ch == "."


def _split_case_boundaries(chunk: str) -> list[str]:
    """Split ``fooBar`` / ``HTTPServer`` style runs into words.

    Digits stay attached to the word they follow.
    """
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        prev = chunk[i - 1]
        cur = chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if cur.isupper() and (prev.islower() or prev.isdigit()):
            words.append(chunk[start:i])
            start = i
        elif cur.isupper() and prev.isupper() and nxt.islower():
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return [word for word in words if word]


def split_words(name: str, separators: SeparatorPolicy = SeparatorPolicy.COMMON_NO_DOT) -> list[str]:
    """Return the words of ``name`` under ``separators``."""
    words: list[str] = []
    chunk: list[str] = []
    for ch in name:
        if separators.is_separator(ch):
            if chunk:
                words.extend(_split_case_boundaries("".join(chunk)))
                chunk = []
            continue
        chunk.append(ch)
    if chunk:
        words.extend(_split_case_boundaries("".join(chunk)))
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def convert_identifier(
    name: str,
    style: CaseStyle = CaseStyle.SNAKE,
    separators: SeparatorPolicy = SeparatorPolicy.COMMON_NO_DOT,
) -> str:
    """Re-case ``name`` into ``style``.

    >>> convert_identifier("My File-Name", CaseStyle.SNAKE)
    'my_file_name'
    >>> convert_identifier("my_file_name", CaseStyle.CAMEL)
    'myFileName'
    """
    words = split_words(name, separators)
    if not words:
        return ""
    if style is CaseStyle.SNAKE:
        return "_".join(word.lower() for word in words)
    if style is CaseStyle.CAMEL:
        return words[0].lower() + "".join(_capitalize(word) for word in words[1:])
    return "".join(_capitalize(word) for word in words)
