"""Interactive file picker: state machine, renderer, and event loop."""

from .highlight import highlight_matches, match_marks
from .loop import present_picker, run_picker_loop
from .render import Renderer, wrap_legend
from .state import DrawSnapshot, Mode, SelectionState, handle_key, parse_filters

__all__ = [
    "DrawSnapshot",
    "Mode",
    "Renderer",
    "SelectionState",
    "handle_key",
    "highlight_matches",
    "match_marks",
    "parse_filters",
    "present_picker",
    "run_picker_loop",
    "wrap_legend",
]
