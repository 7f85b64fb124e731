"""
KeyboardNavigator - maps key presses to active-index moves and panel actions.
"""

from __future__ import annotations

from dataclasses import dataclass

from typeahead.domain.types import KeyAction, NavigatorMode
from typeahead.logger import get_logger

logger = get_logger("navigator")

ARROW_DOWN = "ArrowDown"
ARROW_UP = "ArrowUp"
ENTER = "Enter"
ESCAPE = "Escape"
TAB = "Tab"

# Textual key names -> DOM key names used by the navigator
_KEY_ALIASES = {
    "down": ARROW_DOWN,
    "up": ARROW_UP,
    "enter": ENTER,
    "escape": ESCAPE,
    "tab": TAB,
}


def normalize_key(key: str) -> str:
    """Map a Textual key name onto the DOM name; unknown keys pass through."""
    return _KEY_ALIASES.get(key, key)


@dataclass(frozen=True, slots=True)
class NavigatorSnapshot:
    """What the navigator needs to know about the widget at key-press time."""

    query: str
    item_count: int
    active_index: int
    visible: bool
    create_eligible: bool


@dataclass(frozen=True, slots=True)
class KeyOutcome:
    """
    Result of handling one key.

    Attributes:
        action: Side effect the controller should perform
        active_index: Active index after the key
        prevent_default: Whether the host should suppress the native key behaviour
    """

    action: KeyAction
    active_index: int
    prevent_default: bool = False

    @property
    def handled(self) -> bool:
        return self.action is not KeyAction.NONE


class KeyboardNavigator:
    """Three-mode keyboard state machine: closed, open-empty, open-with-items."""

    def __init__(self, min_chars: int):
        self._min_chars = min_chars

    @staticmethod
    def mode(snapshot: NavigatorSnapshot) -> NavigatorMode:
        if not snapshot.visible:
            return NavigatorMode.CLOSED
        if snapshot.item_count == 0:
            return NavigatorMode.OPEN_EMPTY
        return NavigatorMode.OPEN_WITH_ITEMS

    def handle(self, key: str, snapshot: NavigatorSnapshot) -> KeyOutcome:
        key = normalize_key(key)
        mode = self.mode(snapshot)

        if mode is NavigatorMode.CLOSED:
            outcome = self._handle_closed(key, snapshot)
        elif mode is NavigatorMode.OPEN_EMPTY:
            outcome = self._handle_open_empty(key, snapshot)
        else:
            outcome = self._handle_open_with_items(key, snapshot)

        if outcome.handled:
            logger.debug(
                f"{key} in {mode.value}: {outcome.action.value}, "
                f"index {snapshot.active_index} -> {outcome.active_index}"
            )
        return outcome

    def _handle_closed(self, key: str, snapshot: NavigatorSnapshot) -> KeyOutcome:
        unchanged = KeyOutcome(KeyAction.NONE, snapshot.active_index)
        if key not in (ARROW_DOWN, ARROW_UP) or len(snapshot.query) < self._min_chars:
            return unchanged
        if snapshot.item_count == 0 and not snapshot.create_eligible:
            return unchanged

        if snapshot.item_count == 0:
            index = -1
        elif key == ARROW_DOWN:
            index = 0
        else:
            index = snapshot.item_count - 1
        return KeyOutcome(KeyAction.OPEN, index, prevent_default=True)

    def _handle_open_empty(self, key: str, snapshot: NavigatorSnapshot) -> KeyOutcome:
        if key == ENTER and snapshot.create_eligible:
            return KeyOutcome(KeyAction.CREATE, -1, prevent_default=True)
        if key == ESCAPE:
            return KeyOutcome(KeyAction.CLOSE, -1, prevent_default=True)
        if key == TAB:
            return KeyOutcome(KeyAction.CLOSE, -1, prevent_default=False)
        # Arrows have nothing to move through; other keys type normally
        return KeyOutcome(KeyAction.NONE, -1)

    def _handle_open_with_items(self, key: str, snapshot: NavigatorSnapshot) -> KeyOutcome:
        count = snapshot.item_count
        index = snapshot.active_index

        if key == ARROW_DOWN:
            return KeyOutcome(KeyAction.MOVE, (index + 1) % count, prevent_default=True)
        if key == ARROW_UP:
            if index < 0:
                return KeyOutcome(KeyAction.MOVE, count - 1, prevent_default=True)
            return KeyOutcome(KeyAction.MOVE, (index - 1 + count) % count, prevent_default=True)
        if key == ENTER:
            if 0 <= index < count:
                return KeyOutcome(KeyAction.SELECT, index, prevent_default=True)
            if snapshot.create_eligible:
                return KeyOutcome(KeyAction.CREATE, -1, prevent_default=True)
            return KeyOutcome(KeyAction.NONE, index, prevent_default=True)
        if key == ESCAPE:
            return KeyOutcome(KeyAction.CLOSE, -1, prevent_default=True)
        if key == TAB:
            # Focus still moves on
            return KeyOutcome(KeyAction.CLOSE, -1, prevent_default=False)
        return KeyOutcome(KeyAction.NONE, index)
