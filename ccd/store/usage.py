"""Flat-file usage counters keyed by absolute directory path.

Each record is ``"<count>\\t<path>\\n"``. The whole mapping is rewritten on
every mutation and there is no cross-process locking: two processes that
increment the same path at the same moment can both write ``old + 1``, and
the last writer wins. Paths containing a tab or newline cannot be stored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import StorageIoError

logger = logging.getLogger(__name__)

COUNT_MAX = 2**32 - 1
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _parse_count(text: str) -> int | None:
    """Parse an unsigned 32-bit decimal count, returning ``None`` when invalid."""
    if text.startswith("+"):
        text = text[1:]
    if not text or not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    if value > COUNT_MAX:
        return None
    return value


def parse_usage(text: str) -> dict[str, int]:
    """Decode store text into a ``path -> count`` mapping.

    Lines without a tab, with a non-numeric count, or with an empty path are
    skipped. A later record for the same path replaces an earlier one.
    """
    counts: dict[str, int] = {}
    for raw_line in text.split("\n"):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        count_text, sep, path = line.partition("\t")
        if not sep or not path:
            continue
        count = _parse_count(count_text)
        if count is None:
            continue
        counts[path] = count
    return counts


def format_usage(counts: dict[str, int]) -> str:
    """Encode a ``path -> count`` mapping as store text."""
    return "".join(f"{count}\t{path}\n" for path, count in counts.items())


class UsageStore:
    """Read and rewrite the usage-store file at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, int]:
        """Return current counts; a missing file yields an empty mapping."""
        try:
            # newline="" keeps a lone "\r" inside a path instead of splitting on it.
            with open(self.path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
                text = handle.read()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageIoError(f"cannot read {self.path}: {exc}") from exc
        counts = parse_usage(text)
        logger.debug("loaded %d usage records from %s", len(counts), self.path)
        return counts

    def save(self, counts: dict[str, int]) -> None:
        """Overwrite the store file with ``counts``."""
        try:
            self.path.write_text(format_usage(counts), encoding=_ENCODING, errors=_ERRORS, newline="")
        except OSError as exc:
            raise StorageIoError(f"cannot write {self.path}: {exc}") from exc
        logger.debug("saved %d usage records to %s", len(counts), self.path)

    def increment(self, path: str) -> int:
        """Add one use of ``path`` and return its new count."""
        counts = self.load()
        count = min(COUNT_MAX, counts.get(path, 0) + 1)
        counts[path] = count
        self.save(counts)
        return count

    def reset(self, path: str) -> bool:
        """Forget ``path``; return whether a record was removed.

        Resetting an unknown path leaves the file untouched.
        """
        counts = self.load()
        if path not in counts:
            return False
        del counts[path]
        self.save(counts)
        return True

    def bookmark(self, path: str) -> bool:
        """Record ``path`` with count 1 unless it is already known.

        Returns ``True`` when a new record was written.
        """
        counts = self.load()
        if path in counts:
            return False
        counts[path] = 1
        self.save(counts)
        return True
