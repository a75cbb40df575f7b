"""Persistent directory usage counts.

``UsageStore`` owns the flat ``<count><TAB><path>`` file; ``resolve_store_path``
decides where that file lives for the current environment.
"""

from .paths import STORE_FILENAME, resolve_store_path
from .usage import UsageStore, format_usage, parse_usage

__all__ = [
    "STORE_FILENAME",
    "UsageStore",
    "format_usage",
    "parse_usage",
    "resolve_store_path",
]
