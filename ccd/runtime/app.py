"""Runtime composition for the interactive picker.

Builds the session, enters raw terminal mode, runs the loop, and returns the
confirmed path (already counted) or ``None`` when the user quit.
"""

from __future__ import annotations

import os
import sys

from ..errors import CcdError
from ..search import PathIndex
from ..session import PickerSession
from ..store import UsageStore
from ..ui_theme import UITheme
from .loop import run_main_loop
from .terminal import TerminalController


def run_picker(store: UsageStore, index: PathIndex, theme: UITheme) -> str | None:
    """Run one interactive session on the process's stdin/stdout.

    Loading the usage store happens before the terminal is touched, so a
    :class:`~ccd.errors.StorageIoError` there leaves the screen intact.
    """
    session = PickerSession(store, index)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise CcdError("interactive mode requires a terminal on stdin")
    sys.stdout.flush()
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(session, terminal, stdin_fd, theme)
    return session.finish()


def deliver_selection(path: str) -> None:
    """Write ``path`` to fd 3 when the shell wrapper opened it, else stdout."""
    payload = f"{path}\n".encode(sys.getfilesystemencoding(), errors="surrogateescape")
    try:
        os.write(3, payload)
    except OSError:
        sys.stdout.buffer.write(payload)
        sys.stdout.flush()
