"""Candidate collection over the path index and the usage store.

Index results are split into directories and everything else. Store keys that
contain the pattern (case-insensitively) and still exist as directories are
added back so previously chosen directories survive a stale index.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping

from ..errors import NoDirectoriesFound
from .index import PathIndex
from .ranking import sort_directories
from .types import DirectoryEntry, SearchResult

logger = logging.getLogger(__name__)

LOCATE_LIMIT = 100

IsDir = Callable[[str], bool]


def search_directories(
    pattern: str,
    usage: Mapping[str, int],
    index: PathIndex,
    *,
    limit: int = LOCATE_LIMIT,
    is_dir: IsDir = os.path.isdir,
) -> SearchResult:
    """Collect, deduplicate, and rank directories matching ``pattern``.

    Raises :class:`NoDirectoriesFound` when neither source yields a directory;
    :class:`~ccd.errors.LookupUnavailable` from ``index`` propagates unchanged.
    """
    candidates: dict[str, None] = {}
    files_filtered = 0

    for path in index.lookup(pattern, limit):
        if is_dir(path):
            candidates.setdefault(path, None)
        else:
            files_filtered += 1

    pattern_lower = pattern.lower()
    for path in usage:
        if pattern_lower in path.lower() and is_dir(path):
            candidates.setdefault(path, None)

    if not candidates:
        raise NoDirectoriesFound(pattern)

    logger.debug(
        "pattern %r: %d directories, %d files filtered",
        pattern,
        len(candidates),
        files_filtered,
    )
    directories = sort_directories(
        DirectoryEntry(path=path, count=usage.get(path, 0)) for path in candidates
    )
    return SearchResult(directories=directories, files_filtered=files_filtered)


def frequent_directories(
    usage: Mapping[str, int],
    query: str = "",
    *,
    is_dir: IsDir = os.path.isdir,
) -> list[DirectoryEntry]:
    """Return used directories (count > 0) that still exist, ranked.

    A non-empty ``query`` keeps only paths containing it, ignoring case.
    """
    query_lower = query.lower()
    entries = [
        DirectoryEntry(path=path, count=count)
        for path, count in usage.items()
        if count > 0 and is_dir(path) and query_lower in path.lower()
    ]
    return sort_directories(entries)
