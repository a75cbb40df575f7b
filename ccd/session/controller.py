"""One-shot search, bookmarking, and direct increments.

Only user-confirmed choices grow a usage count: an interactive selection or an
explicit bookmark/increment. The best match picked by a one-shot search is
reported but never counted.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import DirectoryVanished
from ..search import LOCATE_LIMIT, DirectoryEntry, PathIndex, SearchResult, search_directories
from ..store import UsageStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneShotResult:
    """Best match of a one-shot search together with the full result set."""

    chosen: DirectoryEntry
    result: SearchResult

    @property
    def path(self) -> str:
        return self.chosen.path

    def summary(self, limit: int = LOCATE_LIMIT) -> str:
        """Human-readable feedback line for stderr."""
        files_info = ""
        if self.result.files_filtered > 0:
            files_info = f"; {self.result.files_filtered} matching files not shown"
        freq_info = f" (used {self.chosen.count} times)" if self.chosen.count > 0 else ""
        return (
            f"Found {len(self.result.directories)} directories in first {limit} results"
            f"{files_info}, selected: {self.chosen.path}{freq_info}"
        )


class SessionController:
    """Mode-level operations over one usage store and one path index."""

    def __init__(
        self,
        store: UsageStore,
        index: PathIndex,
        *,
        limit: int = LOCATE_LIMIT,
        is_dir: Callable[[str], bool] = os.path.isdir,
    ) -> None:
        self.store = store
        self.index = index
        self.limit = limit
        self.is_dir = is_dir

    def search(self, pattern: str, usage: dict[str, int] | None = None) -> SearchResult:
        """Search with ``usage`` counts, loading them from the store when omitted."""
        if usage is None:
            usage = self.store.load()
        return search_directories(pattern, usage, self.index, limit=self.limit, is_dir=self.is_dir)

    def run_one_shot_search(self, pattern: str) -> OneShotResult:
        """Return the top-ranked directory for ``pattern``.

        Raises :class:`DirectoryVanished` if that directory disappeared after
        it was collected.
        """
        result = self.search(pattern)
        chosen = result.directories[0]
        if not self.is_dir(chosen.path):
            raise DirectoryVanished(chosen.path)
        logger.debug("one-shot pick for %r: %s", pattern, chosen.path)
        return OneShotResult(chosen=chosen, result=result)

    def bookmark(self, current_dir: str) -> bool:
        """Add ``current_dir`` with count 1; ``False`` if it was already known."""
        added = self.store.bookmark(current_dir)
        if not added:
            logger.debug("bookmark skipped, %s already recorded", current_dir)
        return added

    def increment(self, path: str) -> int:
        return self.store.increment(path)
