"""Interactive event loop for the file picker.

Reads one key at a time, applies it to ``SelectionState``, and redraws.
The loop is terminal-agnostic; ``present_picker`` wraps it in a
``TerminalSession`` for real use.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Sequence

from ..input import KeyEvent, read_key
from ..models import FileInfo, SelectionResult
from ..naming import CaseStyle, SeparatorPolicy
from ..terminal import TerminalSession
from ..ui_theme import DEFAULT_THEME, UITheme
from .render import Renderer
from .state import SelectionState, handle_key

logger = logging.getLogger(__name__)


def run_picker_loop(
    state: SelectionState,
    renderer: Renderer,
    next_key: Callable[[], KeyEvent],
) -> SelectionState:
    """Process keys until Enter or Quit in list mode; return the final state."""
    renderer.draw(state, force=True)
    while True:
        key = next_key()
        step = handle_key(state, key)
        if step.finished:
            return state
        renderer.draw(state, force=step.force_redraw)


def present_picker(
    files: Sequence[FileInfo],
    *,
    style: CaseStyle,
    separators: SeparatorPolicy,
    initial_filters: Iterable[str] = (),
    initial_selection: Iterable[int] = (),
    theme: UITheme = DEFAULT_THEME,
    stdin_fd: int | None = None,
    output_fd: int | None = None,
) -> SelectionResult:
    """Run the picker on the real terminal and return the chosen files.

    An empty file list returns immediately without touching the terminal.
    """
    if not files:
        return SelectionResult(files=[], filters=[])

    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    output_fd = sys.stderr.fileno() if output_fd is None else output_fd
    state = SelectionState.create(len(files), filters=initial_filters, selected=initial_selection)
    renderer = Renderer(
        files,
        style=style,
        separators=separators,
        theme=theme,
        output_fd=output_fd,
    )

    logger.info("picker opened with %d files", len(files))
    with TerminalSession(stdin_fd=stdin_fd, output_fd=output_fd):
        run_picker_loop(state, renderer, lambda: read_key(stdin_fd))

    chosen = [files[idx] for idx in state.selected_indices()]
    logger.info("picker closed: %d selected, filters=%r", len(chosen), state.filters)
    return SelectionResult(files=chosen, filters=list(state.filters))
