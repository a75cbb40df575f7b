"""Command-line front door for ccd-pick.

Parses the small flag surface, configures logging, and dispatches to one-shot
search, bookmarking, direct increments, or the interactive picker. This is the
single place where errors become messages and exit codes.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from .errors import CcdError, NoDirectoriesFound, StorageIoError, exit_code_for_exception
from .render.help import USAGE_TEXT
from .runtime.config import load_locate_command, load_locate_timeout, load_theme_name
from .search import LOCATE_LIMIT, LocatePathIndex
from .session import SessionController
from .store import UsageStore, resolve_store_path
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; WARNING unless verbose or ``CCD_LOG_LEVEL``."""
    level = logging.WARNING
    level_name = os.environ.get("CCD_LOG_LEVEL", "").strip().upper()
    if level_name:
        named = getattr(logging, level_name, None)
        if isinstance(named, int):
            level = named
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ccd-pick", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-i", dest="interactive", action="store_true")
    parser.add_argument("-b", "--bookmark", action="store_true")
    parser.add_argument("--increment", metavar="PATH")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("pattern", nargs="*")
    return parser


def _search_pattern(argv: Sequence[str], args: argparse.Namespace, extras: Sequence[str]) -> str | None:
    """First positional word, including unknown dash-prefixed words."""
    words = set(args.pattern) | set(extras)
    for arg in argv:
        if arg in words:
            return arg
    return None


def build_controller() -> SessionController:
    store = UsageStore(resolve_store_path())
    index = LocatePathIndex(load_locate_command(), timeout=load_locate_timeout())
    return SessionController(store, index)


def search_and_print(controller: SessionController, pattern: str) -> int:
    """Print the best directory for ``pattern`` on stdout and feedback on stderr."""
    print(f"Searching for directories matching: {pattern}", file=sys.stderr)
    try:
        picked = controller.run_one_shot_search(pattern)
    except NoDirectoriesFound as exc:
        print(f"No directories found matching '{pattern}'", file=sys.stderr)
        return exc.exit_code
    print(picked.path)
    print(picked.summary(LOCATE_LIMIT), file=sys.stderr)
    return 0


def bookmark_current_directory(controller: SessionController) -> int:
    try:
        current_dir = os.getcwd()
    except OSError as exc:
        raise StorageIoError(f"cannot resolve current directory: {exc}") from exc
    if controller.bookmark(current_dir):
        print(f"Bookmarked: {current_dir}", file=sys.stderr)
    else:
        print(f"Directory already bookmarked: {current_dir}", file=sys.stderr)
    return 0


def run_interactive(controller: SessionController) -> int:
    """Exit 0 after delivering a confirmed path, 1 when the user quit."""
    from .runtime.app import deliver_selection, run_picker

    theme = resolve_theme(load_theme_name(), no_color="NO_COLOR" in os.environ)
    selected = run_picker(controller.store, controller.index, theme)
    if selected is None:
        return 1
    deliver_selection(selected)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, run one mode, and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    args, extras = build_parser().parse_known_args(argv)
    configure_logging(args.verbose)

    pattern = _search_pattern(argv, args, extras)
    if pattern is None and args.verbose and len(argv) == 1:
        # A lone -v/--verbose selects no mode, so it is searched for.
        pattern = argv[0]
    if args.help or not (args.interactive or args.bookmark or args.increment is not None or pattern):
        sys.stdout.write(USAGE_TEXT)
        return 0

    controller = build_controller()
    try:
        if args.interactive:
            return run_interactive(controller)
        if args.bookmark:
            return bookmark_current_directory(controller)
        if args.increment is not None:
            count = controller.increment(args.increment)
            logger.debug("%s now used %d times", args.increment, count)
            return 0
        return search_and_print(controller, pattern)
    except CcdError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exit_code_for_exception(exc)


if __name__ == "__main__":
    sys.exit(main())
