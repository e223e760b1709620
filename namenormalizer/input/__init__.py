"""Input-layer public API: key events and the raw byte decoder."""

from .keys import KeyEvent, KeyKind
from .reader import ESC_DRAIN_BYTES, _PENDING_BYTES, decode_byte, read_key

__all__ = [
    "KeyEvent",
    "KeyKind",
    "read_key",
    "decode_byte",
    "_PENDING_BYTES",
    "ESC_DRAIN_BYTES",
]
