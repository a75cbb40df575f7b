"""Ordering rule shared by search results and the frequent view."""

from __future__ import annotations

from collections.abc import Iterable

from .types import DirectoryEntry


def directory_sort_key(entry: DirectoryEntry) -> tuple[int, int]:
    """Most used first, then shortest path first."""
    return (-entry.count, len(entry.path))


def sort_directories(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Return ``entries`` ranked by :func:`directory_sort_key`.

    The sort is stable, so entries tied on both count and length keep their
    input order.
    """
    return sorted(entries, key=directory_sort_key)
