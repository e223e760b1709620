"""Low-level terminal input decoding.

Reads one byte from stdin per call and translates it into a ``KeyEvent``.
ESC is resolved with a non-blocking drain that recognizes the up/down cursor
sequences; CR/LF peeks for the paired newline byte of a single Enter press.
"""

from __future__ import annotations

import contextlib
import os

from .keys import (
    BACKSPACE,
    DOWN,
    ENTER,
    ESCAPE,
    OTHER,
    QUIT,
    START_FILTER,
    TOGGLE,
    TOGGLE_ALL,
    UP,
    KeyEvent,
)
from ..terminal import single_byte_mode

ESC_DRAIN_BYTES = 8
_PENDING_BYTES: list[bytes] = []

_BYTE_KEYS: dict[bytes, KeyEvent] = {
    b"\x03": QUIT,
    b"q": QUIT,
    b"Q": QUIT,
    b"\x01": TOGGLE_ALL,
    b"\x06": START_FILTER,
    b"k": UP,
    b"\x10": UP,
    b"j": DOWN,
    b"\x0e": DOWN,
    b"\x00": TOGGLE,
    b" ": TOGGLE,
    b"\x7f": BACKSPACE,
}

_NEWLINE_PAIRS = {b"\r": b"\n", b"\n": b"\r"}


def _read_byte(fd: int) -> bytes:
    try:
        return os.read(fd, 1)
    except InterruptedError:
        return b""


def _read_available(fd: int, count: int) -> bytes:
    """Read up to ``count`` bytes without blocking.

    The descriptor's blocking flag is restored on every path.
    """
    was_blocking = os.get_blocking(fd)
    os.set_blocking(fd, False)
    try:
        return os.read(fd, count)
    except (BlockingIOError, InterruptedError):
        return b""
    finally:
        os.set_blocking(fd, was_blocking)


def _decode_escape(fd: int) -> KeyEvent:
    rest = _read_available(fd, ESC_DRAIN_BYTES)
    if rest[:2] == b"[A":
        return UP
    if rest[:2] == b"[B":
        return DOWN
    return ESCAPE


def _swallow_paired_newline(fd: int, first: bytes) -> None:
    """Drop the second byte of a CRLF/LFCR Enter; keep any other peeked byte."""
    peek = _read_available(fd, 1)
    if not peek or peek == _NEWLINE_PAIRS[first]:
        return
    _PENDING_BYTES.append(peek)


def decode_byte(ch: bytes, fd: int) -> KeyEvent:
    """Map one input byte to a key, reading lookahead bytes from ``fd`` if needed."""
    key = _BYTE_KEYS.get(ch)
    if key is not None:
        return key
    if ch in _NEWLINE_PAIRS:
        _swallow_paired_newline(fd, ch)
        return ENTER
    if ch == b"\x1b":
        return _decode_escape(fd)
    if 0x20 <= ch[0] <= 0x7E:
        return KeyEvent.of_char(ch.decode("ascii"))
    return OTHER


def read_key(fd: int, *, raw: bool = True) -> KeyEvent:
    """Block for one key press on ``fd``.

    With ``raw`` the descriptor is switched to single-byte raw mode for the
    duration of the read and lookahead, and the cooked attributes are
    published for the SIGINT handler first. A zero-byte read yields ``OTHER``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
        return decode_byte(ch, fd)

    mode = single_byte_mode(fd) if raw else contextlib.nullcontext()
    with mode:
        ch = _read_byte(fd)
        if not ch:
            return OTHER
        return decode_byte(ch, fd)
