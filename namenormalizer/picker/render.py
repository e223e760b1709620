"""Full-frame ANSI rendering for the file picker.

Composes the whole screen as one string and writes it to the error stream.
A ``DrawSnapshot`` of the last frame suppresses redraws when nothing visible
changed.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

from ..models import FileInfo
from ..naming import CaseStyle, SeparatorPolicy, target_name
from ..terminal import terminal_columns
from ..ui_theme import DEFAULT_THEME, UITheme
from .highlight import highlight_matches
from .state import FILTER_JOINER, DrawSnapshot, SelectionState

CLEAR_AND_HOME = "\033[2J\033[H"
TITLE = "Select files to rename"
LEGEND_CHIPS: tuple[str, ...] = (
    "Move: ↑ / k, ↓ / j, ^P / ^N",
    "Toggle: Space / ^Space",
    "All: ^A",
    "Filter: ^F",
    "Confirm: Enter",
    "Quit: q / ^C",
)
LEGEND_SPACER = "   "
MIN_LEGEND_WIDTH = 40
NO_FILTERS_PLACEHOLDER = "(none)"
FILTER_PROMPT = "Filter (comma-separated):"
FILTER_HELP = "Enter to apply • Esc to cancel • Backspace to delete"


def wrap_legend(chips: Sequence[str], max_width: int, spacer: str = LEGEND_SPACER) -> list[str]:
    """Greedily pack ``chips`` into lines no wider than ``max_width``.

    Chips are never split; a chip wider than ``max_width`` gets a line of
    its own.
    """
    lines: list[str] = []
    current = ""
    for chip in chips:
        if not current:
            current = chip
        elif len(current) + len(spacer) + len(chip) <= max_width:
            current += spacer + chip
        else:
            lines.append(current)
            current = chip
    if current:
        lines.append(current)
    return lines


def legend_width(columns: int) -> int:
    return max(MIN_LEGEND_WIDTH, columns - 2)


class Renderer:
    """Draws ``SelectionState`` frames for one picker session."""

    def __init__(
        self,
        files: Sequence[FileInfo],
        *,
        style: CaseStyle,
        separators: SeparatorPolicy,
        theme: UITheme = DEFAULT_THEME,
        output_fd: int | None = None,
        columns: Callable[[], int] | None = None,
    ) -> None:
        self.files = files
        self.style = style
        self.separators = separators
        self.theme = theme
        self.output_fd = sys.stderr.fileno() if output_fd is None else output_fd
        self._columns = columns if columns is not None else lambda: terminal_columns(self.output_fd)
        self._last_drawn: DrawSnapshot | None = None

    def preview_name(self, file: FileInfo, filters: Sequence[str]) -> str:
        return target_name(file, self.style, self.separators, filters)

    def _file_row(self, index: int, file: FileInfo, state: SelectionState) -> str:
        theme = self.theme
        is_current = index == state.cursor
        marker = "✓" if index in state.selected else " "
        prefix = ">" if is_current else " "
        name = highlight_matches(file.filename, state.filters, is_current=is_current, theme=theme)
        preview = self.preview_name(file, state.filters)

        out: list[str] = []
        if is_current:
            out.append(theme.reverse)
        out.append(f"{prefix} [{marker}] {name}")
        if is_current:
            out.append(theme.reverse_off)
        out.append(f"  {theme.dim}→ {preview}{theme.reset}\n")
        return "".join(out)

    def build_frame(self, state: SelectionState, filter_buffer: str | None = None) -> str:
        """Return the complete ANSI frame for ``state``."""
        theme = self.theme
        out: list[str] = [CLEAR_AND_HOME]
        out.append(f"{theme.title}{TITLE}{theme.reset}\n")

        out.append(theme.dim)
        for line in wrap_legend(LEGEND_CHIPS, legend_width(self._columns())):
            out.append(line + "\n")
        out.append(theme.reset)

        summary = FILTER_JOINER.join(state.filters) if state.filters else NO_FILTERS_PLACEHOLDER
        out.append("\n")
        out.append(f"{theme.dim}Filters:{theme.reset} {summary}  ")
        out.append(f"{theme.dim}(press ^F to edit){theme.reset}\n\n")

        for index, file in enumerate(self.files):
            out.append(self._file_row(index, file, state))

        if filter_buffer is not None:
            out.append(f"\n{theme.prompt}{FILTER_PROMPT}{theme.reset} {filter_buffer}\n")
            out.append(f"{theme.dim}{FILTER_HELP}{theme.reset}\n")
        return "".join(out)

    def draw(
        self,
        state: SelectionState,
        *,
        force: bool = False,
        filter_buffer: str | None = None,
    ) -> bool:
        """Write a frame unless nothing visible changed; return whether it drew.

        ``filter_buffer`` defaults to the state's live edit buffer while the
        state is in filter-input mode.
        """
        snapshot = DrawSnapshot.of(state)
        if not force and snapshot == self._last_drawn:
            return False
        self._last_drawn = snapshot

        if filter_buffer is None and state.editing:
            filter_buffer = state.filter_buffer or ""
        frame = self.build_frame(state, filter_buffer)
        self._write(frame.encode("utf-8", errors="replace"))
        return True

    def _write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.output_fd, view)
            view = view[written:]
