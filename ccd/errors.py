"""Error taxonomy and exit code mapping for the CLI."""

from __future__ import annotations


class CcdError(Exception):
    """Base error carrying a deterministic process exit code."""

    exit_code: int = 1


class LookupUnavailable(CcdError):
    """The external path index could not be launched or did not finish."""


class NoDirectoriesFound(CcdError):
    """Neither the path index nor the usage store produced a directory."""

    def __init__(self, pattern: str = "") -> None:
        super().__init__("No directories found")
        self.pattern = pattern


class DirectoryVanished(CcdError):
    """A chosen path no longer exists or is no longer a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory not found: {path}")
        self.path = path


class StorageIoError(CcdError):
    """The usage-store file could not be read or written."""


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve a deterministic exit code for an exception."""
    if isinstance(exc, CcdError):
        return exc.exit_code
    return 1
