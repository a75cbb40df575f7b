"""Picker frame rendering.

Builds the three stacked panes (input, results, help) as ANSI rows from
``SessionState`` and writes them in one ``os.write`` call.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, display_width
from ..search import DirectoryEntry
from ..session import SessionState, ViewMode
from ..ui_theme import UITheme
from .help import USAGE_TEXT, help_line

SELECTED_MARKER = ">> "
UNSELECTED_MARKER = "   "
INPUT_PANE_ROWS = 3
HELP_PANE_ROWS = 3

__all__ = [
    "USAGE_TEXT",
    "build_picker_frame",
    "help_line",
    "input_placeholder",
    "input_title",
    "list_item_text",
    "list_title",
    "render_picker",
    "result_rows",
    "visible_list_start",
]


def input_title(view_mode: ViewMode) -> str:
    if view_mode is ViewMode.SEARCH:
        return "Search All Directories"
    return "Search Frequently Used"


def input_placeholder(view_mode: ViewMode) -> str:
    if view_mode is ViewMode.SEARCH:
        return "Start typing or press [Tab] to see frequent choices"
    return "Search the list below, or press [Tab] to search across all directories"


def list_title(state: SessionState) -> str:
    count = len(state.directories)
    if state.view_mode is ViewMode.FREQUENT:
        if count == 0:
            return "Frequent Directories (none)"
        return f"Frequent Directories ({count} found)"
    if state.files_filtered > 0:
        return f"Search Results ({count} found; {state.files_filtered} matching files not shown)"
    return f"Search Results ({count} found)"


def list_item_text(entry: DirectoryEntry, theme: UITheme) -> str:
    """Path plus a ``[count]`` badge for directories that have been used."""
    if entry.count > 0:
        return f"{entry.path}{theme.count_badge} [{entry.count}]{theme.reset}"
    return entry.path


def result_rows(height: int) -> int:
    """Number of list rows that fit between the input and help panes."""
    return max(1, height - INPUT_PANE_ROWS - HELP_PANE_ROWS - 2)


def visible_list_start(selected: int | None, list_start: int, rows: int, count: int) -> int:
    """Scroll offset that keeps ``selected`` inside a ``rows``-tall window."""
    rows = max(1, rows)
    start = list_start
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + rows:
            start = selected - rows + 1
    return max(0, min(start, max(0, count - rows)))


def _pad(text: str, width: int) -> str:
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def _box_top(title: str, width: int, theme: UITheme) -> str:
    inner = max(0, width - 2)
    label = clip_ansi_line(f" {title} ", inner)
    fill = "─" * max(0, inner - display_width(label))
    return f"{theme.border}┌{theme.reset}{theme.title}{label}{theme.reset}{theme.border}{fill}┐{theme.reset}"


def _box_row(content: str, width: int, theme: UITheme) -> str:
    inner = max(0, width - 2)
    body = _pad(content, inner)
    if "\033" in body:
        body += "\033[0m"
    return f"{theme.border}│{theme.reset}{body}{theme.border}│{theme.reset}"


def _box_bottom(width: int, theme: UITheme) -> str:
    return f"{theme.border}└{'─' * max(0, width - 2)}┘{theme.reset}"


def _input_content(state: SessionState, theme: UITheme) -> str:
    if not state.input:
        return f"{theme.placeholder}{input_placeholder(state.view_mode)}{theme.reset}"
    return f"{theme.input_text}{state.input}{theme.reset}\033[7m \033[0m"


def _list_contents(state: SessionState, list_start: int, rows: int, width: int, theme: UITheme) -> list[str]:
    if not state.directories and state.view_mode is ViewMode.FREQUENT:
        hint = f"{theme.empty_hint}No frequently used directories found{theme.reset}"
        return [hint] + [""] * (rows - 1)

    out: list[str] = []
    inner = max(0, width - 2)
    for row in range(rows):
        idx = list_start + row
        if idx >= len(state.directories):
            out.append("")
            continue
        text = list_item_text(state.directories[idx], theme)
        if idx != state.selected_index:
            out.append(UNSELECTED_MARKER + text)
            continue
        if theme.reset:
            # Badge colors end with a reset; restore the highlight after it.
            text = text.replace(theme.reset, theme.reset + theme.row_selected)
        out.append(f"{theme.row_selected}{_pad(SELECTED_MARKER + text, inner)}")
    return out


def build_picker_frame(
    state: SessionState,
    width: int,
    height: int,
    theme: UITheme,
    list_start: int = 0,
) -> list[str]:
    """Return the screen rows for one picker frame, top to bottom."""
    width = max(4, width)
    rows = result_rows(height)
    lines: list[str] = [
        _box_top(input_title(state.view_mode), width, theme),
        _box_row(_input_content(state, theme), width, theme),
        _box_bottom(width, theme),
        _box_top(list_title(state), width, theme),
    ]
    for content in _list_contents(state, list_start, rows, width, theme):
        lines.append(_box_row(content, width, theme))
    lines.append(_box_bottom(width, theme))
    lines.append(_box_top("Help", width, theme))
    if state.status_message:
        footer = f"{theme.status_error}{state.status_message}{theme.reset}"
    else:
        footer = help_line(theme)
    lines.append(_box_row(footer, width, theme))
    lines.append(_box_bottom(width, theme))
    return lines


def render_picker(
    state: SessionState,
    width: int,
    height: int,
    theme: UITheme,
    list_start: int = 0,
) -> str:
    """Return a full-screen redraw payload for one frame."""
    rows = build_picker_frame(state, width, height, theme, list_start)
    return "\033[H\033[J" + "\r\n".join(rows)
