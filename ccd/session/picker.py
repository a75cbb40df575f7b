"""Interactive picker state machine.

``PickerSession`` owns a :class:`SessionState` and mutates it only through
event methods (typing, navigation, view toggle, frequency reset, confirm,
quit). Rendering and key decoding live elsewhere; everything here is
deterministic given a path index, a usage mapping, and a directory predicate.

Storage writes made while browsing are best effort: a failed write is logged
and reported in ``status_message`` but never ends the session.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from ..errors import LookupUnavailable, NoDirectoriesFound, StorageIoError
from ..search import (
    LOCATE_LIMIT,
    DirectoryEntry,
    PathIndex,
    frequent_directories,
    search_directories,
    sort_directories,
)
from ..store import UsageStore
from .navigation import PAGE_SIZE, NavigationDirection, navigate_index

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    SEARCH = "search"
    FREQUENT = "frequent"


class PickerPhase(Enum):
    BROWSING = "browsing"
    QUITTING = "quitting"
    SELECTED = "selected"


@dataclass
class SessionState:
    """Mutable picker state shared with the renderer."""

    input: str = ""
    directories: list[DirectoryEntry] = field(default_factory=list)
    selected_index: int | None = None
    view_mode: ViewMode = ViewMode.SEARCH
    quit: bool = False
    user_selected: bool = False
    selected_path: str | None = None
    files_filtered: int = 0
    status_message: str = ""


class PickerSession:
    """Event-driven transitions over :class:`SessionState`.

    ``usage`` defaults to a fresh ``store.load()``; a load failure raises
    :class:`StorageIoError` before any state exists.
    """

    def __init__(
        self,
        store: UsageStore,
        index: PathIndex,
        *,
        usage: dict[str, int] | None = None,
        limit: int = LOCATE_LIMIT,
        page_size: int = PAGE_SIZE,
        is_dir: Callable[[str], bool] = os.path.isdir,
    ) -> None:
        self.store = store
        self.index = index
        self.usage = store.load() if usage is None else dict(usage)
        self.limit = limit
        self.page_size = page_size
        self.is_dir = is_dir
        self.state = SessionState()

    @property
    def phase(self) -> PickerPhase:
        if not self.state.quit:
            return PickerPhase.BROWSING
        if self.state.user_selected:
            return PickerPhase.SELECTED
        return PickerPhase.QUITTING

    def selected_entry(self) -> DirectoryEntry | None:
        idx = self.state.selected_index
        if idx is None or not 0 <= idx < len(self.state.directories):
            return None
        return self.state.directories[idx]

    def _select_first(self) -> None:
        self.state.selected_index = 0 if self.state.directories else None

    def _clear_results(self) -> None:
        self.state.directories = []
        self.state.files_filtered = 0
        self.state.selected_index = None

    def run_search(self) -> None:
        """Re-query the path index for the current input."""
        state = self.state
        state.status_message = ""
        if not state.input:
            self._clear_results()
            return
        try:
            result = search_directories(
                state.input,
                self.usage,
                self.index,
                limit=self.limit,
                is_dir=self.is_dir,
            )
        except NoDirectoriesFound:
            self._clear_results()
            return
        except LookupUnavailable as exc:
            logger.debug("interactive search failed: %s", exc)
            self._clear_results()
            state.status_message = str(exc)
            return
        state.directories = result.directories
        state.files_filtered = result.files_filtered
        self._select_first()

    def show_frequent(self) -> None:
        """List used directories filtered by the current input."""
        self.state.status_message = ""
        self.state.directories = frequent_directories(self.usage, self.state.input, is_dir=self.is_dir)
        self.state.files_filtered = 0
        self._select_first()

    def refresh(self) -> None:
        if self.state.view_mode is ViewMode.SEARCH:
            self.run_search()
        else:
            self.show_frequent()

    def insert_text(self, text: str) -> None:
        if not text:
            return
        self.state.input += text
        self.refresh()

    def backspace(self) -> None:
        self.state.input = self.state.input[:-1]
        self.refresh()

    def clear_input(self) -> None:
        if not self.state.input:
            return
        self.state.input = ""
        self.refresh()

    def navigate(self, direction: NavigationDirection) -> None:
        self.state.selected_index = navigate_index(
            self.state.selected_index,
            len(self.state.directories),
            direction,
            self.page_size,
        )

    def toggle_view(self) -> None:
        """Switch between live search and the frequent-directory listing."""
        if self.state.view_mode is ViewMode.SEARCH:
            self.state.view_mode = ViewMode.FREQUENT
            self.show_frequent()
            return
        self.state.view_mode = ViewMode.SEARCH
        self.run_search()

    def reset_selected_frequency(self) -> None:
        """Forget the selected directory's usage count.

        The frequent view drops the row; the search view keeps it with a zero
        count and re-ranks, following the row to its new position.
        """
        entry = self.selected_entry()
        if entry is None:
            return
        state = self.state
        selected_index = state.selected_index or 0
        self.usage.pop(entry.path, None)
        state.status_message = ""
        try:
            self.store.reset(entry.path)
        except StorageIoError as exc:
            logger.debug("reset of %s not persisted: %s", entry.path, exc)
            state.status_message = f"Could not save frequency: {exc}"

        if state.view_mode is ViewMode.FREQUENT:
            del state.directories[selected_index]
            if not state.directories:
                state.selected_index = None
            else:
                state.selected_index = min(selected_index, len(state.directories) - 1)
            return

        state.directories[selected_index] = entry.with_count(0)
        state.directories = sort_directories(state.directories)
        for idx, candidate in enumerate(state.directories):
            if candidate.path == entry.path:
                state.selected_index = idx
                break

    def confirm(self) -> None:
        """Finish with the selected row, if any."""
        entry = self.selected_entry()
        if entry is None:
            return
        self.state.selected_path = entry.path
        self.state.user_selected = True
        self.state.quit = True

    def quit(self) -> None:
        self.state.quit = True

    def finish(self) -> str | None:
        """Count the confirmed selection and return its path.

        Returns ``None`` unless the session ended in :attr:`PickerPhase.SELECTED`.
        The count is persisted best effort; a write failure still delivers
        the path.
        """
        if self.phase is not PickerPhase.SELECTED or self.state.selected_path is None:
            return None
        path = self.state.selected_path
        try:
            self.usage[path] = self.store.increment(path)
        except StorageIoError as exc:
            logger.warning("could not record selection of %s: %s", path, exc)
        return path
