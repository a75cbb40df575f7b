"""Session-level orchestration.

``SessionController`` serves the one-shot CLI flows; ``PickerSession`` is the
interactive state machine driven by discrete input events.
"""

from .controller import OneShotResult, SessionController
from .navigation import PAGE_SIZE, NavigationDirection, navigate_index
from .picker import PickerPhase, PickerSession, SessionState, ViewMode

__all__ = [
    "PAGE_SIZE",
    "NavigationDirection",
    "OneShotResult",
    "PickerPhase",
    "PickerSession",
    "SessionController",
    "SessionState",
    "ViewMode",
    "navigate_index",
]
