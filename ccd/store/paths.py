"""Usage-store file location."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

STORE_FILENAME = ".ccd_frequency"


def resolve_store_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the usage-store path under ``$HOME``.

    Falls back to the system temp directory when ``HOME`` is unset or empty.
    """
    env = os.environ if environ is None else environ
    home = env.get("HOME") or tempfile.gettempdir()
    return Path(home) / STORE_FILENAME
