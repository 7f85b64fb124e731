"""
TypeaheadController - wires debouncing, evaluation, lifecycle, visibility and
navigation into one event-driven state machine.

All entry points are synchronous reactions to discrete events (keystroke, key,
focus, blur, pointer press, click). Timers and fetches run on the current
asyncio loop; every state change is announced as a ``StateChanged`` event on
the controller's event bus so renderers can redraw.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from typeahead.config import EXIT_ANIMATION_TIMEOUT, TypeaheadConfig
from typeahead.core.debouncer import Debouncer
from typeahead.core.dispatcher import SelectionDispatcher
from typeahead.core.evaluator import Evaluation, QueryEvaluator
from typeahead.core.lifecycle import ResultLifecycleTracker
from typeahead.core.navigator import KeyboardNavigator, KeyOutcome, NavigatorSnapshot
from typeahead.core.outside_click import OutsideClickSubscription
from typeahead.core.state import TypeaheadState
from typeahead.core.strategy import select_strategy
from typeahead.core.visibility import VisibilityController
from typeahead.domain.events import EntryCreated, EventBus, OptionSelected, StateChanged
from typeahead.domain.types import DisplayItem, KeyAction, NavigatorMode, Option, PanelState
from typeahead.logger import get_logger

logger = get_logger("controller")


class TypeaheadController:
    """
    Composition root of a single typeahead instance.

    Flow:
        keystroke -> Debouncer -> QueryEvaluator -> ResultLifecycleTracker
        and VisibilityController -> StateChanged -> renderer

    Key presses go through the KeyboardNavigator; selection and creation go
    through the SelectionDispatcher.
    """

    def __init__(
        self,
        config: TypeaheadConfig,
        event_bus: EventBus | None = None,
        exit_timeout: float = EXIT_ANIMATION_TIMEOUT,
    ):
        """
        Initialize the controller.

        Args:
            config: Host configuration
            event_bus: Bus to publish state changes on. A private bus is created when None.
            exit_timeout: Seconds before exit animation markers are cleared
        """
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.state = TypeaheadState()

        self.visibility = VisibilityController(config.min_chars)
        self.navigator = KeyboardNavigator(config.min_chars)
        self.tracker = ResultLifecycleTracker(exit_timeout=exit_timeout, on_settled=self._on_settled)
        self.dispatcher = SelectionDispatcher(config.on_select, config.on_create)
        self.evaluator = QueryEvaluator(
            select_strategy(config.static_data, config.fetch_data, config.filter_item),
            config.min_chars,
            on_results=self._on_results,
            on_loading=self._on_loading,
        )
        self.debouncer: Debouncer[str] = Debouncer(config.debounce_delay, self._on_debounced)

        self._outside_click: OutsideClickSubscription | None = None
        self._torn_down = False

        logger.debug(
            f"Controller '{config.id}' ready (min_chars={config.min_chars}, "
            f"debounce_delay={config.debounce_delay}s)"
        )

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def widget_id(self) -> str:
        return self.config.id

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def results(self) -> tuple[Option, ...]:
        return self.state.results

    @property
    def active_index(self) -> int:
        return self.state.active_index

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def panel_state(self) -> PanelState:
        return self.visibility.state

    @property
    def create_eligible(self) -> bool:
        return self.visibility.create_eligible(
            self.state.query, self.state.results, self.tracker.has_exiting, self.state.loading
        )

    @property
    def visible(self) -> bool:
        return self.visibility.is_visible(
            self.state.query, self.state.results, self.tracker.has_exiting, self.state.loading
        )

    @property
    def show_create_button(self) -> bool:
        return self.visible and self.create_eligible

    @property
    def create_button_label(self) -> str:
        return self.config.create_button_text(self.state.query)

    @property
    def navigator_mode(self) -> NavigatorMode:
        return self.navigator.mode(self._snapshot())

    def display_items(self) -> list[DisplayItem]:
        """Rows to render, exiting rows first."""
        return self.tracker.display_items()

    def render_item(self, option: Option) -> Any:
        return self.config.render_item(option)

    def index_of(self, option: Option) -> int:
        """Position of ``option`` in the current results by id, -1 when absent."""
        for index, candidate in enumerate(self.state.results):
            if candidate.id == option.id:
                return index
        return -1

    # ------------------------------------------------------------------
    # Accessibility
    # ------------------------------------------------------------------

    def aria_attributes(self) -> dict[str, Any]:
        """Attributes of the text input."""
        active = self.state.active_option
        return {
            "aria-autocomplete": "list",
            "aria-expanded": self.visible,
            "aria-controls": self.config.list_id,
            "aria-activedescendant": self.config.option_dom_id(active) if active is not None else None,
        }

    def listbox_attributes(self) -> dict[str, Any]:
        return {"role": "listbox", "id": self.config.list_id}

    def option_attributes(self, option: Option) -> dict[str, Any]:
        active = self.state.active_option
        return {
            "role": "option",
            "id": self.config.option_dom_id(option),
            "aria-selected": active is not None and active.id == option.id,
        }

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def input_changed(self, text: str) -> None:
        """A keystroke changed the input text."""
        if self._ignore_after_teardown("input_changed"):
            return
        self.state.query = text
        self.visibility.on_query_changed(text)
        self.debouncer.push(text)
        self._notify("query")

    def focus(self) -> None:
        if self._ignore_after_teardown("focus"):
            return
        if self.visibility.on_focus(
            self.state.query, self.state.results, self.tracker.has_exiting, self.state.loading
        ):
            logger.debug(f"Focus opened panel for {self.state.query!r}")
        self._notify("focus")

    def blur(self) -> None:
        """Focus left the input: close the panel, never select."""
        self._close_if_open("blur")

    def outside_click(self) -> None:
        """A press landed outside the widget: close the panel, never select."""
        self._close_if_open("outside_click")

    def key(self, key: str) -> KeyOutcome:
        """
        Handle a key press on the input.

        Args:
            key: DOM or Textual key name

        Returns:
            The navigator outcome; hosts suppress the native behaviour when
            ``prevent_default`` is set
        """
        if self._torn_down:
            logger.debug(f"Controller '{self.widget_id}' torn down, ignoring key {key!r}")
            return KeyOutcome(KeyAction.NONE, self.state.active_index)

        outcome = self.navigator.handle(key, self._snapshot())

        if outcome.action is KeyAction.OPEN:
            self.visibility.open()
            self.state.set_active_index(outcome.active_index)
        elif outcome.action is KeyAction.MOVE:
            self.state.set_active_index(outcome.active_index)
        elif outcome.action is KeyAction.SELECT:
            self.select_index(outcome.active_index)
            return outcome
        elif outcome.action is KeyAction.CREATE:
            self.create()
            return outcome
        elif outcome.action is KeyAction.CLOSE:
            self.visibility.close()
            self.state.active_index = -1
        else:
            return outcome

        self._notify("navigate")
        return outcome

    def hover(self, option: Option) -> None:
        """Pointer moved over a row; exiting rows are not in the results and are ignored."""
        if self._ignore_after_teardown("hover"):
            return
        index = self.index_of(option)
        if index != -1 and index != self.state.active_index:
            self.state.set_active_index(index)
            self._notify("hover")

    # ------------------------------------------------------------------
    # Selection / creation
    # ------------------------------------------------------------------

    def select_index(self, index: int) -> None:
        if 0 <= index < len(self.state.results):
            self.select_option(self.state.results[index])

    def select_option(self, option: Option) -> None:
        """Activate ``option`` (Enter on the highlight, or a click)."""
        if self._ignore_after_teardown("select"):
            return
        self.dispatcher.select(self.state, option, self.visibility)
        # Keep results in step with the echoed value
        self.debouncer.push(self.state.query)
        self.event_bus.publish(OptionSelected(widget_id=self.widget_id, option=option, value=option.value))
        self._notify("select")

    def create(self) -> bool:
        """
        Ask the host to create an entry for the current query.

        Returns:
            True when ``on_create`` was called
        """
        if self._ignore_after_teardown("create"):
            return False
        query = self.state.query
        if not self.dispatcher.create(self.state, self.tracker, self.visibility):
            return False

        # Anything still in flight answers a query that no longer exists
        self.evaluator.invalidate()
        self.debouncer.cancel()
        self.state.debounced_query = ""
        self.state.loading = False
        self.event_bus.publish(EntryCreated(widget_id=self.widget_id, query=query))
        self._notify("create")
        return True

    def commit_free_text(self) -> None:
        if self._ignore_after_teardown("commit_free_text"):
            return
        self.dispatcher.commit_free_text(self.state)
        self._close_if_open("commit")

    # ------------------------------------------------------------------
    # Data sources
    # ------------------------------------------------------------------

    def replace_data(
        self,
        static_data: Sequence[Option | dict] | None = None,
        fetch_data: Callable | None = None,
    ) -> None:
        """
        Swap the data sources and re-resolve the current debounced query.

        Same precedence as the config: ``fetch_data`` wins over ``static_data``.
        Fetches issued against the previous sources are discarded when they
        resolve.

        Args:
            static_data: New in-memory dataset; plain dicts are validated into options
            fetch_data: New async lookup
        """
        if self._ignore_after_teardown("replace_data"):
            return
        options = None
        if static_data is not None:
            options = tuple(
                option if isinstance(option, Option) else Option.model_validate(option) for option in static_data
            )
        self.evaluator.set_strategy(select_strategy(options, fetch_data, self.config.filter_item))
        logger.info(
            f"Controller '{self.widget_id}' data replaced, re-evaluating {self.state.debounced_query!r}"
        )
        self.evaluator.evaluate(self.state.debounced_query)

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------

    def watch_outside_clicks(self, contains: Callable[[object], bool]) -> OutsideClickSubscription:
        """
        Subscribe to pointer presses on the event bus until teardown.

        Args:
            contains: Returns True when a press target lies inside the widget

        Returns:
            The subscription; closing it early is allowed
        """
        if self._outside_click is not None:
            self._outside_click.close()
        self._outside_click = OutsideClickSubscription(self.event_bus, contains, self.outside_click)
        return self._outside_click

    async def settle(self) -> None:
        """Emit any pending debounced query now and wait for outstanding fetches."""
        self.debouncer.flush()
        await self.evaluator.wait_idle()

    def teardown(self) -> None:
        """Cancel every timer, drop late fetch results and stop listening for clicks."""
        if self._torn_down:
            return
        self._torn_down = True
        self.debouncer.cancel()
        self.tracker.cancel()
        self.evaluator.close()
        if self._outside_click is not None:
            self._outside_click.close()
            self._outside_click = None
        logger.info(f"Controller '{self.widget_id}' torn down")

    # ------------------------------------------------------------------
    # Internal callbacks
    # ------------------------------------------------------------------

    def _on_debounced(self, query: str) -> None:
        self.state.debounced_query = query
        self.evaluator.evaluate(query)

    def _on_loading(self, loading: bool) -> None:
        if self.state.loading != loading:
            self.state.loading = loading
            self._notify("loading")

    def _on_results(self, evaluation: Evaluation) -> None:
        previous = self.state.results
        self.tracker.recompute(previous, evaluation.results)
        self.state.replace_results(evaluation.results)
        self._notify("results")

    def _on_settled(self) -> None:
        self._notify("settled")

    def _snapshot(self) -> NavigatorSnapshot:
        return NavigatorSnapshot(
            query=self.state.query,
            item_count=len(self.state.results),
            active_index=self.state.active_index,
            visible=self.visible,
            create_eligible=self.create_eligible,
        )

    def _close_if_open(self, reason: str) -> None:
        # Leaves SUPPRESS_NEXT_FOCUS alone so the pending suppression survives
        if self._torn_down or not self.visibility.is_open:
            return
        self.visibility.close()
        self.state.active_index = -1
        self._notify(reason)

    def _ignore_after_teardown(self, operation: str) -> bool:
        if self._torn_down:
            logger.debug(f"Controller '{self.widget_id}' torn down, ignoring {operation}")
        return self._torn_down

    def _notify(self, reason: str) -> None:
        self.event_bus.publish(StateChanged(widget_id=self.widget_id, reason=reason))
