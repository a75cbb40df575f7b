"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker chrome, rows, and help line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    input_text: str
    placeholder: str
    row_selected: str
    count_badge: str
    empty_hint: str
    status_error: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    title="\033[38;5;250m",
    input_text="\033[33m",
    placeholder="\033[2;38;5;244m",
    row_selected="\033[1;30;102m",
    count_badge="\033[1;36m",
    empty_hint="\033[3;38;5;244m",
    status_error="\033[38;5;203m",
    help_key="\033[38;5;229m",
    help_dim="\033[38;5;250m",
)


OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[38;5;31m",
    title="\033[1;38;5;45m",
    input_text="\033[38;5;153m",
    placeholder="\033[2;38;5;110m",
    row_selected="\033[1;38;5;16;48;5;45m",
    count_badge="\033[1;38;5;117m",
    empty_hint="\033[3;38;5;110m",
    status_error="\033[38;5;215m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)


PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    input_text="",
    placeholder="",
    row_selected="\033[7m",
    count_badge="",
    empty_hint="",
    status_error="",
    help_key="",
    help_dim="",
)


_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
