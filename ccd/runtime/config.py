"""Persistent JSON config helpers.

Reads the locate command, its optional timeout, and the UI theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..search.index import DEFAULT_LOCATE_COMMAND

logger = logging.getLogger(__name__)

APP_NAME = "ccd"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_locate_command() -> tuple[str, ...]:
    """Return the index command as an argv prefix.

    Accepts a single string or a list of non-empty strings; anything else
    falls back to ``locate``.
    """
    value = load_config().get("locate_command")
    if isinstance(value, str) and value.strip():
        return (value.strip(),)
    if isinstance(value, list) and value and all(isinstance(part, str) and part for part in value):
        return tuple(value)
    return DEFAULT_LOCATE_COMMAND


def load_locate_timeout() -> float | None:
    """Return a positive lookup timeout in seconds, or ``None`` for no limit."""
    value = load_config().get("locate_timeout")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0:
        return None
    return float(value)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
