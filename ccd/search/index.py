"""External path-index lookup.

``PathIndex`` is the seam the collector depends on; ``LocatePathIndex`` backs
it with the system ``locate`` database.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from typing import Protocol

from ..errors import LookupUnavailable

logger = logging.getLogger(__name__)

DEFAULT_LOCATE_COMMAND: tuple[str, ...] = ("locate",)


class PathIndex(Protocol):
    """Anything that can return indexed paths matching a pattern."""

    def lookup(self, pattern: str, limit: int) -> list[str]:
        ...


def _decode_output(raw: bytes) -> list[str]:
    """Split index output into non-blank paths, keeping undecodable bytes."""
    text = raw.decode(sys.getfilesystemencoding(), errors="surrogateescape")
    lines = (line[:-1] if line.endswith("\r") else line for line in text.split("\n"))
    return [line for line in lines if line.strip()]


class LocatePathIndex:
    """Query ``locate --limit N PATTERN`` and return its lines verbatim."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_LOCATE_COMMAND,
        timeout: float | None = None,
    ) -> None:
        self.command = tuple(command) or DEFAULT_LOCATE_COMMAND
        self.timeout = timeout

    def build_argv(self, pattern: str, limit: int) -> list[str]:
        return [*self.command, "--limit", str(limit), pattern]

    def lookup(self, pattern: str, limit: int) -> list[str]:
        """Run the index program.

        A non-zero exit is read as "no matches"; failing to launch it, or the
        optional timeout expiring, raises :class:`LookupUnavailable`.
        """
        argv = self.build_argv(pattern, limit)
        logger.debug("running %s", argv)
        try:
            proc = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise LookupUnavailable(
                f"Locate command error: {argv[0]} timed out after {self.timeout}s"
            ) from exc
        except OSError as exc:
            raise LookupUnavailable(f"Locate command error: Failed to execute {argv[0]}: {exc}") from exc

        paths = _decode_output(proc.stdout or b"")
        if proc.returncode != 0:
            logger.debug("%s exited with %d and %d lines", argv[0], proc.returncode, len(paths))
        return paths
