"""
ResultLifecycleTracker - per-item animation states across consecutive result sets.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Sequence

from typeahead.domain.types import AnimationState, DisplayItem, Option, OptionId
from typeahead.logger import get_logger

logger = get_logger("lifecycle")


class ResultLifecycleTracker:
    """
    Diff successive result sets into entering/exiting/stable rows.

    Rules applied by :meth:`recompute`:
    - ids in the previous results or already exiting, but absent from the new
      results, become EXITING
    - ids new to the results become ENTERING
    - ids that were exiting and come back become STABLE (the exit is cancelled)
    - ids present in both result sets are STABLE

    A one-shot timer clears every marker ``exit_timeout`` seconds after the
    latest recompute; a newer recompute replaces an older pending clear.
    """

    def __init__(
        self,
        exit_timeout: float = 0.3,
        on_settled: Callable[[], None] | None = None,
    ):
        """
        Initialize the tracker.

        Args:
            exit_timeout: Seconds an exit transition is assumed to take
            on_settled: Called after the timer cleared the markers
        """
        self.exit_timeout = exit_timeout
        self._on_settled = on_settled
        self._states: dict[OptionId, AnimationState] = {}
        self._exiting: dict[OptionId, Option] = {}
        self._current: tuple[Option, ...] = ()
        self._clear_handle: asyncio.TimerHandle | None = None

    @property
    def states(self) -> dict[OptionId, AnimationState]:
        """Copy of the id -> state map of rows still transitioning."""
        return dict(self._states)

    @property
    def has_exiting(self) -> bool:
        return bool(self._exiting)

    @property
    def clear_pending(self) -> bool:
        return self._clear_handle is not None

    def state_of(self, option_id: OptionId) -> AnimationState | None:
        """Animation state of ``option_id``; None when it is not displayed at all."""
        if option_id in self._states:
            return self._states[option_id]
        if any(option.id == option_id for option in self._current):
            return AnimationState.STABLE
        return None

    def recompute(self, previous: Sequence[Option], current: Sequence[Option]) -> None:
        """Derive animation states for ``current`` replacing ``previous``."""
        current_ids = {option.id for option in current}
        previous_ids = {option.id for option in previous}

        exiting: dict[OptionId, Option] = {}
        for option in (*self._exiting.values(), *previous):
            if option.id not in current_ids and option.id not in exiting:
                exiting[option.id] = option

        states: dict[OptionId, AnimationState] = {option_id: AnimationState.EXITING for option_id in exiting}
        for option in current:
            if option.id in self._exiting or option.id in previous_ids:
                states[option.id] = AnimationState.STABLE
            else:
                states[option.id] = AnimationState.ENTERING

        self._exiting = exiting
        self._states = states
        self._current = tuple(current)

        logger.debug(
            f"Recomputed lifecycle: {len(exiting)} exiting, "
            f"{sum(1 for s in states.values() if s is AnimationState.ENTERING)} entering, "
            f"{len(current)} current"
        )
        self._schedule_clear()

    def display_items(self) -> list[DisplayItem]:
        """
        Rows to render: exiting ones first in their prior order, then the
        current results in order.
        """
        items = [DisplayItem(option, AnimationState.EXITING) for option in self._exiting.values()]
        for index, option in enumerate(self._current):
            state = self._states.get(option.id, AnimationState.STABLE)
            items.append(DisplayItem(option, state, stagger=index))
        return items

    def clear(self) -> None:
        """Forget every marker and the current results immediately."""
        self.cancel()
        self._states.clear()
        self._exiting.clear()
        self._current = ()

    def cancel(self) -> None:
        """Cancel the pending clear timer."""
        if self._clear_handle is not None:
            self._clear_handle.cancel()
            self._clear_handle = None

    def _schedule_clear(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._clear_handle = loop.call_later(self.exit_timeout, self._settle)

    def _settle(self) -> None:
        self._clear_handle = None
        logger.debug(f"Exit window elapsed, clearing {len(self._states)} marker(s)")
        self._states.clear()
        self._exiting.clear()
        if self._on_settled is not None:
            self._on_settled()
