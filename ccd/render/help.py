"""Help-line content for the picker and usage text for the CLI.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_KEYS: tuple[tuple[str, str], ...] = (
    ("↑/↓", "Navigate"),
    ("PgUp/PgDn", "Page"),
    ("Home/End", "First/Last"),
    ("Tab", "Search/Frequent"),
    ("Shift+Del", "Reset Count"),
    ("Enter", "Select"),
    ("Esc", "Quit"),
)

USAGE_TEXT = """\
ccd-pick - Change Change Directory Picker

USAGE:
    ccd-pick -i                   Enter interactive mode
    ccd-pick -b                   Bookmark current directory
    ccd-pick --increment PATH     Count one use of PATH
    ccd-pick <search_pattern>     Search for directories matching pattern

DESCRIPTION:
    Uses the locate database to quickly look up directories to cd into.
    Remembers most frequently used directories for faster access.
    Usually invoked via the ccd wrapper function.

OPTIONS:
    -h, --help       Show this help message
    -i               Interactive mode (used internally by shell wrapper)
    -b, --bookmark   Add current directory to bookmarks with frequency 1
    -v, --verbose    Log debug details to stderr

EXAMPLES:
    ccd-pick -i      # Enter interactive mode
    ccd-pick -b      # Bookmark current directory
    ccd-pick proj    # Find directories containing 'proj'
    ccd-pick Docs    # Find directories containing 'Docs'

INTERACTIVE MODE:
    Type to search, use ↑/↓ to navigate, PgUp/PgDn for fast navigation
    Home/End to jump to first/last, Tab to toggle frequent/search view
    Shift+Del to reset frequency count, Ctrl+U to clear the input
    Enter to select, Esc to quit
    Directories are sorted by usage frequency (most used first)
"""


def help_line(theme: UITheme) -> str:
    """Return the one-line key summary shown under the result list."""
    parts = [
        f"{theme.help_key}{key}{theme.reset}{theme.help_dim}: {label}{theme.reset}"
        for key, label in HELP_KEYS
    ]
    return f"{theme.help_dim} | {theme.reset}".join(parts)
