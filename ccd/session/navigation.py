"""Selection-index arithmetic for the picker list."""

from __future__ import annotations

from enum import Enum

PAGE_SIZE = 10


class NavigationDirection(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    FIRST = "first"
    LAST = "last"


def navigate_index(
    selected: int | None,
    count: int,
    direction: NavigationDirection,
    page_size: int = PAGE_SIZE,
) -> int | None:
    """Return the selection after moving in ``direction`` over ``count`` rows.

    Next/previous wrap around the ends; page moves and first/last clamp. With
    nothing selected every move lands on row 0, except ``LAST``. An empty list
    keeps ``selected`` unchanged.
    """
    if count <= 0:
        return selected
    last = count - 1
    if direction is NavigationDirection.FIRST:
        return 0
    if direction is NavigationDirection.LAST:
        return last
    if selected is None:
        return 0
    if direction is NavigationDirection.NEXT:
        return 0 if selected >= last else selected + 1
    if direction is NavigationDirection.PREVIOUS:
        return last if selected <= 0 else min(selected - 1, last)
    if direction is NavigationDirection.PAGE_UP:
        return max(0, min(selected, last) - page_size)
    return min(last, selected + page_size)
