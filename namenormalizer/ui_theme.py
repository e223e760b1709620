"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker chrome. Structural sequences
(alternate screen, cursor visibility, clear) are not themed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the picker renderer."""

    name: str
    reset: str
    title: str
    dim: str
    prompt: str
    reverse: str
    reverse_off: str
    match: str
    match_off: str
    current_match: str
    current_match_off: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1m",
    dim="\033[2m",
    prompt="\033[1m",
    reverse="\033[7m",
    reverse_off="\033[27m",
    match="\033[1m\033[33m",
    match_off="\033[22m\033[39m",
    current_match="\033[4m",
    current_match_off="\033[24m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    dim="\033[2m",
    prompt="\033[1;38;5;45m",
    reverse="\033[7m",
    reverse_off="\033[27m",
    match="\033[1m\033[36m",
    match_off="\033[22m\033[39m",
    current_match="\033[4m",
    current_match_off="\033[24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    dim="",
    prompt="",
    reverse="",
    reverse_off="",
    match="",
    match_off="",
    current_match="",
    current_match_off="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def color_disabled_by_env() -> bool:
    """Honor the ``NO_COLOR`` convention (any non-empty value)."""
    return bool(os.environ.get("NO_COLOR"))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "color_disabled_by_env",
    "normalize_theme_name",
    "resolve_theme",
]
