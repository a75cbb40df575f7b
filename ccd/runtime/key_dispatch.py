"""Key-token dispatch onto ``PickerSession`` events."""

from __future__ import annotations

from ..session import NavigationDirection, PickerSession

NAVIGATION_KEYS: dict[str, NavigationDirection] = {
    "DOWN": NavigationDirection.NEXT,
    "CTRL_N": NavigationDirection.NEXT,
    "UP": NavigationDirection.PREVIOUS,
    "CTRL_P": NavigationDirection.PREVIOUS,
    "PAGE_UP": NavigationDirection.PAGE_UP,
    "PAGE_DOWN": NavigationDirection.PAGE_DOWN,
    "HOME": NavigationDirection.FIRST,
    "END": NavigationDirection.LAST,
}

QUIT_KEYS = frozenset({"ESC", "CTRL_C", "CTRL_D"})


def _is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def handle_picker_key(key: str, session: PickerSession) -> bool:
    """Apply one key to ``session``; return whether anything was handled.

    Frequency reset requires Shift+Delete so a stray Delete cannot wipe a
    count. ``q`` is ordinary input.
    """
    if not key:
        return False
    if key in QUIT_KEYS:
        session.quit()
        return True
    if key == "ENTER":
        session.confirm()
        return True
    if key == "TAB":
        session.toggle_view()
        return True
    if key == "BACKSPACE":
        session.backspace()
        return True
    if key == "CTRL_U":
        session.clear_input()
        return True
    if key == "SHIFT_DELETE":
        session.reset_selected_frequency()
        return True
    direction = NAVIGATION_KEYS.get(key)
    if direction is not None:
        session.navigate(direction)
        return True
    if _is_text_key(key):
        session.insert_text(key)
        return True
    return False
