"""State enums for panel visibility and keyboard navigation."""

from enum import Enum

__all__ = ["PanelState", "NavigatorMode", "KeyAction"]


class PanelState(Enum):
    """Explicit open/closed state of the result panel.

    ``SUPPRESS_NEXT_FOCUS`` is a closed panel that ignores exactly one
    focus-triggered open, entered right after a programmatic selection.
    """

    CLOSED = "closed"
    OPEN = "open"
    SUPPRESS_NEXT_FOCUS = "suppress_next_focus"


class NavigatorMode(Enum):
    """Keyboard navigator modes, derived from visibility and item count."""

    CLOSED = "closed"
    OPEN_EMPTY = "open_empty"
    OPEN_WITH_ITEMS = "open_with_items"


class KeyAction(Enum):
    """Side effect requested by a key press."""

    NONE = "none"
    OPEN = "open"
    MOVE = "move"
    SELECT = "select"
    CREATE = "create"
    CLOSE = "close"
