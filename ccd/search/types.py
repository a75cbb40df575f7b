"""Value types produced by directory search."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One candidate directory and how often it has been chosen."""

    path: str
    count: int = 0

    def with_count(self, count: int) -> "DirectoryEntry":
        """Return a copy of this entry carrying ``count``."""
        return DirectoryEntry(path=self.path, count=max(0, count))


@dataclass(frozen=True)
class SearchResult:
    """Ranked directories plus the number of non-directory matches dropped."""

    directories: list[DirectoryEntry]
    files_filtered: int = 0
