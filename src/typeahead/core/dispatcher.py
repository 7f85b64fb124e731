"""
SelectionDispatcher - runs the host side effects of selecting or creating.
"""

from typeahead.core.lifecycle import ResultLifecycleTracker
from typeahead.core.state import TypeaheadState
from typeahead.core.visibility import VisibilityController
from typeahead.domain.protocols import CreateHandler, SelectHandler
from typeahead.domain.types import Option
from typeahead.logger import get_logger

logger = get_logger("dispatcher")


class SelectionDispatcher:
    """
    Notify the host and reset transient state after a selection or creation.

    Closing the panel for any other reason (outside click, blur, Escape)
    never goes through here, so free-typed text that matched nothing is kept
    without invoking either callback.
    """

    def __init__(
        self,
        on_select: SelectHandler,
        on_create: CreateHandler,
    ):
        self._on_select = on_select
        self._on_create = on_create

    def select(self, state: TypeaheadState, option: Option, visibility: VisibilityController) -> None:
        """Activate ``option``: notify the host and echo its value into the input."""
        logger.info(f"Selected option id={option.id!r} value={option.value!r}")
        self._on_select(option, option.value)
        state.query = option.value
        state.active_index = -1
        visibility.close_after_selection()

    def create(
        self,
        state: TypeaheadState,
        tracker: ResultLifecycleTracker,
        visibility: VisibilityController,
    ) -> bool:
        """
        Ask the host to create an entry for the current query.

        Returns:
            False when the query is empty and nothing happened
        """
        query = state.query
        if not query:
            logger.debug("Create requested with an empty query, ignoring")
            return False

        logger.info(f"Creating entry for {query!r}")
        self._on_create(query)
        state.query = ""
        state.replace_results(())
        tracker.clear()
        visibility.close()
        return True

    def commit_free_text(self, state: TypeaheadState) -> None:
        """Hand the typed text to the host as a selection without an option."""
        logger.info(f"Committing free text {state.query!r}")
        self._on_select(None, state.query)
