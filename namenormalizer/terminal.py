"""Terminal control helpers for the picker session.

Owns tty attribute save/restore, alternate-screen switching, cursor
visibility, and the SIGINT handler that puts the terminal back before the
process dies.
"""

from __future__ import annotations

import contextlib
import fcntl
import logging
import os
import signal
import struct
import sys
import termios

from .errors import TerminalSessionError

ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_SCREEN = b"\x1b[?25h\x1b[?1049l"
INTERRUPT_EXIT_STATUS = 128 + signal.SIGINT
DEFAULT_COLUMNS = 80

logger = logging.getLogger(__name__)


class SavedTerminalState:
    """Cooked tty attributes published for the SIGINT handler.

    Single writer, single asynchronous reader. The writer is the main loop,
    which must call ``publish`` immediately before every blocking read so the
    handler always restores the attributes that were active when control
    entered that read. The reader is ``handle_sigint``, which only restores
    attributes, writes a fixed byte string, and exits.
    """

    __slots__ = ("stdin_fd", "output_fd", "attrs")

    def __init__(self) -> None:
        self.stdin_fd = 0
        self.output_fd = 2
        self.attrs: list | None = None

    def publish(self, stdin_fd: int, attrs: list) -> None:
        self.stdin_fd = stdin_fd
        self.attrs = attrs

    def clear(self) -> None:
        self.attrs = None


SAVED_STATE = SavedTerminalState()


def handle_sigint(_signum: int, _frame: object) -> None:
    """Restore the published tty state, leave the alternate screen, exit 130."""
    state = SAVED_STATE
    attrs = state.attrs
    if attrs is not None:
        with contextlib.suppress(termios.error, OSError):
            termios.tcsetattr(state.stdin_fd, termios.TCSANOW, attrs)
    with contextlib.suppress(OSError):
        os.write(state.output_fd, LEAVE_SCREEN)
    os._exit(INTERRUPT_EXIT_STATUS)


def single_byte_attributes(cooked: list) -> list:
    """Derive raw-read attributes from ``cooked``.

    Input is unbuffered and unechoed with ``VMIN=1``/``VTIME=0`` so a read
    blocks for exactly one byte. ``ISIG`` stays set so Ctrl+C still raises
    SIGINT instead of arriving as a byte.
    """
    raw = list(cooked)
    raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    raw[1] &= ~termios.OPOST
    raw[2] &= ~(termios.CSIZE | termios.PARENB)
    raw[2] |= termios.CS8
    raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN)
    raw[3] |= termios.ISIG
    cc = list(cooked[6])
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    raw[6] = cc
    return raw


@contextlib.contextmanager
def single_byte_mode(fd: int, state: SavedTerminalState = SAVED_STATE):
    """Bracket one blocking read with raw mode, refreshing the shared state first."""
    try:
        cooked = termios.tcgetattr(fd)
    except termios.error as exc:
        raise TerminalSessionError(f"cannot read terminal attributes: {exc}") from exc
    state.publish(fd, cooked)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, single_byte_attributes(cooked))
    except termios.error as exc:
        raise TerminalSessionError(f"cannot enter raw input mode: {exc}") from exc
    try:
        yield
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSANOW, cooked)
        except termios.error as exc:
            raise TerminalSessionError(f"cannot restore terminal attributes: {exc}") from exc


def terminal_columns(fd: int | None = None) -> int:
    """Return the terminal width of ``fd`` (stderr by default), or 80."""
    if fd is None:
        fd = sys.stderr.fileno()
    try:
        packed = fcntl.ioctl(fd, termios.TIOCGWINSZ, b"\0" * 8)
    except OSError:
        return DEFAULT_COLUMNS
    _rows, cols, _xpix, _ypix = struct.unpack("HHHH", packed)
    return cols if cols > 0 else DEFAULT_COLUMNS


class TerminalSession:
    """Scoped owner of terminal mode, alternate screen, and SIGINT handling.

    Use as a context manager; ``close`` runs exactly once no matter how the
    ``with`` block is left.
    """

    def __init__(
        self,
        stdin_fd: int | None = None,
        output_fd: int | None = None,
        state: SavedTerminalState = SAVED_STATE,
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.output_fd = sys.stderr.fileno() if output_fd is None else output_fd
        self._state = state
        self._saved_tty_state: list | None = None
        self._previous_handler: object = None
        self._handler_installed = False
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def open(self) -> None:
        """Save cooked attributes, enter the alternate screen, install SIGINT handler."""
        if self._active:
            return
        try:
            self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalSessionError(f"cannot read terminal attributes: {exc}") from exc
        self._state.output_fd = self.output_fd
        self._state.publish(self.stdin_fd, self._saved_tty_state)
        self._active = True
        try:
            os.write(self.output_fd, ENTER_SCREEN)
            self._previous_handler = signal.signal(signal.SIGINT, handle_sigint)
            self._handler_installed = True
        except BaseException:
            self.close()
            raise
        logger.debug("terminal session opened (stdin=%d, output=%d)", self.stdin_fd, self.output_fd)

    def close(self) -> None:
        """Restore attributes, show the cursor, and leave the alternate screen.

        Every step is attempted even if an earlier one fails; the first
        attribute failure is re-raised as ``TerminalSessionError`` afterwards.
        """
        if not self._active:
            return
        self._active = False
        failure: BaseException | None = None

        if self._saved_tty_state is not None:
            try:
                termios.tcsetattr(self.stdin_fd, termios.TCSANOW, self._saved_tty_state)
            except termios.error as exc:
                logger.error("could not restore terminal attributes: %s", exc)
                failure = TerminalSessionError(f"cannot restore terminal attributes: {exc}")
        try:
            os.write(self.output_fd, LEAVE_SCREEN)
        except OSError as exc:
            logger.error("could not leave alternate screen: %s", exc)
            if failure is None:
                failure = exc
        if self._handler_installed:
            previous = self._previous_handler
            signal.signal(signal.SIGINT, signal.SIG_DFL if previous is None else previous)
            self._handler_installed = False
            self._previous_handler = None
        self._state.clear()
        logger.debug("terminal session closed")

        if failure is not None:
            raise failure

    def __enter__(self) -> TerminalSession:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
