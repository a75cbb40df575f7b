"""Directory candidate collection and ranking.

Candidates come from an external path index plus previously used directories;
``sort_directories`` orders them by usage count, then by path length.
"""

from .collector import LOCATE_LIMIT, frequent_directories, search_directories
from .index import LocatePathIndex, PathIndex
from .ranking import directory_sort_key, sort_directories
from .types import DirectoryEntry, SearchResult

__all__ = [
    "LOCATE_LIMIT",
    "DirectoryEntry",
    "LocatePathIndex",
    "PathIndex",
    "SearchResult",
    "directory_sort_key",
    "frequent_directories",
    "search_directories",
    "sort_directories",
]
