"""
VisibilityController - whether the result panel and the create affordance are shown.
"""

from typing import Sequence

from typeahead.domain.types import Option, PanelState
from typeahead.logger import get_logger

logger = get_logger("visibility")


class VisibilityController:
    """
    Explicit open/closed state machine for the result panel.

    The panel is visible only while it is OPEN and there is something to show:
    results, or the create affordance. After a programmatic selection the
    panel sits in SUPPRESS_NEXT_FOCUS so the focus event that typically follows
    does not reopen it; that state lasts for exactly one focus.
    """

    def __init__(self, min_chars: int):
        self._min_chars = min_chars
        self._state = PanelState.CLOSED

    @property
    def state(self) -> PanelState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is PanelState.OPEN

    def create_eligible(
        self,
        query: str,
        results: Sequence[Option],
        has_exiting: bool,
        loading: bool,
    ) -> bool:
        """True when the "create new entry" affordance may be offered."""
        return len(query) >= self._min_chars and not results and not has_exiting and not loading

    def is_visible(
        self,
        query: str,
        results: Sequence[Option],
        has_exiting: bool,
        loading: bool,
    ) -> bool:
        """True when the panel should be rendered."""
        if not self.is_open:
            return False
        return bool(results) or self.create_eligible(query, results, has_exiting, loading)

    def open(self) -> None:
        self._transition(PanelState.OPEN, "open")

    def close(self) -> None:
        self._transition(PanelState.CLOSED, "close")

    def close_after_selection(self) -> None:
        self._transition(PanelState.SUPPRESS_NEXT_FOCUS, "selection")

    def on_query_changed(self, query: str) -> None:
        """Typing reopens the panel once the query is long enough and closes it below that."""
        if len(query) >= self._min_chars:
            self.open()
        else:
            self.close()

    def on_focus(
        self,
        query: str,
        results: Sequence[Option],
        has_exiting: bool,
        loading: bool,
    ) -> bool:
        """
        Handle focus of the input.

        Returns:
            True if the focus opened the panel
        """
        if self._state is PanelState.SUPPRESS_NEXT_FOCUS:
            self._transition(PanelState.CLOSED, "suppressed focus")
            return False

        if len(query) >= self._min_chars and (
            results or self.create_eligible(query, results, has_exiting, loading)
        ):
            self.open()
            return True
        return False

    def _transition(self, new_state: PanelState, trigger: str) -> None:
        if new_state is not self._state:
            logger.debug(f"Panel {self._state.value} -> {new_state.value} ({trigger})")
            self._state = new_state
