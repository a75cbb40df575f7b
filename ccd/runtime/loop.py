"""Blocking read-key, dispatch, render loop for the picker.

Each iteration finishes its state update and redraw before the next key is
read; a slow path-index lookup blocks the whole loop.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..render import render_picker, result_rows, visible_list_start
from ..session import PickerSession
from ..ui_theme import UITheme
from .key_dispatch import handle_picker_key
from .terminal import TerminalController


@dataclass
class LoopView:
    """Presentation-only state kept between frames."""

    list_start: int = 0
    dirty: bool = True


def current_terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def run_main_loop(
    session: PickerSession,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    *,
    read_key_fn: Callable[[int], str] = read_key,
    terminal_size: Callable[[], tuple[int, int]] = current_terminal_size,
) -> None:
    """Run the picker until the session quits or a selection is confirmed.

    End of input (``read_key_fn`` returning ``""``) is treated as quit.
    """
    view = LoopView()
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while not session.state.quit:
            width, height = terminal_size()
            if (width, height) != last_size:
                last_size = (width, height)
                view.dirty = True

            state = session.state
            start = visible_list_start(
                state.selected_index,
                view.list_start,
                result_rows(height),
                len(state.directories),
            )
            if start != view.list_start:
                view.list_start = start
                view.dirty = True

            if view.dirty:
                terminal.write(render_picker(state, width, height, theme, view.list_start))
                view.dirty = False

            key = read_key_fn(stdin_fd)
            if not key:
                session.quit()
                break
            if handle_picker_key(key, session):
                view.dirty = True
