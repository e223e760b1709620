"""Picker selection state and its key-driven transitions.

The state machine has two modes, ``LIST`` and ``FILTER_INPUT``, stored as
data on ``SelectionState``. Transition functions never touch the terminal;
they report back whether the session finished and whether the next draw
must be forced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from ..input.keys import KeyEvent, KeyKind

FILTER_JOINER = ", "

logger = logging.getLogger(__name__)


class Mode(Enum):
    LIST = "list"
    FILTER_INPUT = "filter_input"


def parse_filters(text: str) -> list[str]:
    """Split comma-separated filter text; strip pieces and drop empty ones.

    Order and duplicates are preserved.
    """
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def sanitize_filters(filters: Iterable[str]) -> list[str]:
    return [item.strip() for item in filters if item.strip()]


@dataclass
class SelectionState:
    file_count: int
    cursor: int = 0
    selected: set[int] = field(default_factory=set)
    filters: list[str] = field(default_factory=list)
    mode: Mode = Mode.LIST
    filter_buffer: str | None = None

    @classmethod
    def create(
        cls,
        file_count: int,
        filters: Iterable[str] = (),
        selected: Iterable[int] = (),
    ) -> SelectionState:
        """Build an initial state, dropping out-of-range indices and blank filters."""
        count = max(0, file_count)
        return cls(
            file_count=count,
            selected={idx for idx in selected if 0 <= idx < count},
            filters=sanitize_filters(filters),
        )

    @property
    def editing(self) -> bool:
        return self.mode is Mode.FILTER_INPUT

    def all_selected(self) -> bool:
        return self.selected == set(range(self.file_count))

    def selected_indices(self) -> list[int]:
        return sorted(self.selected)


@dataclass(frozen=True)
class DrawSnapshot:
    """Value-comparable copy of the visible parts of ``SelectionState``."""

    cursor: int
    selected: frozenset[int]
    filters: tuple[str, ...]

    @classmethod
    def of(cls, state: SelectionState) -> DrawSnapshot:
        return cls(state.cursor, frozenset(state.selected), tuple(state.filters))


@dataclass(frozen=True)
class StepResult:
    finished: bool = False
    force_redraw: bool = False


CONTINUE = StepResult()
FINISHED = StepResult(finished=True)
FORCE_REDRAW = StepResult(force_redraw=True)


def move_cursor(state: SelectionState, delta: int) -> None:
    """Move the cursor by ``delta`` rows, wrapping at both ends."""
    if state.file_count <= 0:
        return
    state.cursor = (state.cursor + delta + state.file_count) % state.file_count


def toggle_current(state: SelectionState) -> None:
    if state.file_count <= 0:
        return
    state.selected ^= {state.cursor}


def toggle_all(state: SelectionState) -> None:
    """Clear a full selection; otherwise select every index."""
    if state.all_selected():
        state.selected.clear()
    else:
        state.selected = set(range(state.file_count))


def start_filter_edit(state: SelectionState) -> None:
    state.mode = Mode.FILTER_INPUT
    state.filter_buffer = FILTER_JOINER.join(state.filters)


def commit_filter_edit(state: SelectionState) -> None:
    state.filters = parse_filters(state.filter_buffer or "")
    state.mode = Mode.LIST
    state.filter_buffer = None
    logger.debug("filters committed: %r", state.filters)


def cancel_filter_edit(state: SelectionState) -> None:
    state.mode = Mode.LIST
    state.filter_buffer = None


def handle_list_key(state: SelectionState, key: KeyEvent) -> StepResult:
    kind = key.kind
    if kind is KeyKind.START_FILTER:
        start_filter_edit(state)
        return FORCE_REDRAW
    if kind is KeyKind.UP:
        move_cursor(state, -1)
    elif kind is KeyKind.DOWN:
        move_cursor(state, 1)
    elif kind is KeyKind.TOGGLE:
        toggle_current(state)
    elif kind is KeyKind.TOGGLE_ALL:
        toggle_all(state)
    elif kind is KeyKind.ENTER:
        return FINISHED
    elif kind is KeyKind.QUIT:
        state.selected.clear()
        return FINISHED
    return CONTINUE


def handle_filter_key(state: SelectionState, key: KeyEvent) -> StepResult:
    """Edit the filter buffer; every filter-mode key forces a redraw."""
    kind = key.kind
    if kind is KeyKind.CHAR:
        state.filter_buffer = (state.filter_buffer or "") + key.char
    elif kind is KeyKind.BACKSPACE:
        if state.filter_buffer:
            state.filter_buffer = state.filter_buffer[:-1]
    elif kind is KeyKind.ENTER:
        commit_filter_edit(state)
    elif kind is KeyKind.ESCAPE or kind is KeyKind.QUIT:
        cancel_filter_edit(state)
    return FORCE_REDRAW


def handle_key(state: SelectionState, key: KeyEvent) -> StepResult:
    """Apply one key to ``state`` according to its current mode."""
    if state.mode is Mode.FILTER_INPUT:
        return handle_filter_key(state, key)
    return handle_list_key(state, key)
