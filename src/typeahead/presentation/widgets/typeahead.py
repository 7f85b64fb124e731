"""
Typeahead - Textual rendering of a TypeaheadController.

The widget owns no state of its own: it forwards input events to the
controller and redraws whenever the controller publishes ``StateChanged``.
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Label, LoadingIndicator

from typeahead.config import TypeaheadConfig
from typeahead.core.controller import TypeaheadController
from typeahead.domain.events import EntryCreated, EventBus, OptionSelected, StateChanged
from typeahead.domain.types import Option
from typeahead.logger import get_logger

from .result_item import CreateEntryButton, ResultItem

logger = get_logger("typeahead_widget")


class TypeaheadInput(Input):
    """
    Input that lets the controller claim navigation keys first.

    Keys the controller handles with ``prevent_default`` are stopped here, so
    neither the Input's own key handling nor bindings (Enter -> submit) run.
    Tab is never stopped: focus still moves on after the panel closes.
    """

    def __init__(self, controller: TypeaheadController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller

    def on_key(self, event: events.Key) -> None:
        outcome = self._controller.key(event.key)
        if outcome.prevent_default:
            event.prevent_default()
            event.stop()


class Typeahead(Widget):
    """
    Search-as-you-type input with a transitioning result panel.

    Layout:
    ┌──────────────────────────────┐
    │ Label                        │
    │ [ input              ] ...   │  <- loading indicator while fetching
    │ ┌──────────────────────────┐ │
    │ │ exiting rows (fading)    │ │
    │ │ current results          │ │
    │ │ Create "query"           │ │
    │ └──────────────────────────┘ │
    └──────────────────────────────┘
    """

    DEFAULT_CSS = """
    Typeahead {
        height: auto;
    }

    Typeahead > .typeahead-label {
        padding: 0 1;
        color: $text-muted;
    }

    Typeahead LoadingIndicator {
        height: 1;
    }

    Typeahead > .typeahead-results {
        height: auto;
        max-height: 12;
        overflow-y: auto;
        border: round $accent;
        display: none;
    }

    Typeahead.-expanded > .typeahead-results {
        display: block;
    }
    """

    class Selected(Message):
        """Posted after an option was selected."""

        def __init__(self, typeahead: "Typeahead", option: Option, value: str) -> None:
            super().__init__()
            self.typeahead = typeahead
            self.option = option
            self.value = value

    class Created(Message):
        """Posted after the create affordance was used."""

        def __init__(self, typeahead: "Typeahead", query: str) -> None:
            super().__init__()
            self.typeahead = typeahead
            self.query = query

    def __init__(
        self,
        config: TypeaheadConfig,
        event_bus: EventBus | None = None,
        commit_on_submit: bool = False,
        **kwargs,
    ) -> None:
        """
        Initialize the widget.

        Args:
            config: Typeahead configuration
            event_bus: Shared bus. Hosts publish ``PointerPressed`` on it to
                enable closing on outside clicks.
            commit_on_submit: Report free text through ``on_select(None, text)``
                when Enter submits with nothing highlighted
        """
        super().__init__(**kwargs)
        self.config = config
        self.controller = TypeaheadController(config, event_bus=event_bus)
        self.commit_on_submit = commit_on_submit
        self._row_signature: list[tuple] = []
        self._render_scheduled = False
        self.add_class(*config.styles.container.split())

    def compose(self) -> ComposeResult:
        styles = self.config.styles
        if self.config.label:
            yield Label(self.config.label, classes="typeahead-label")
        yield TypeaheadInput(
            self.controller,
            placeholder=self.config.placeholder or "",
            classes=f"typeahead-input {styles.input}".strip(),
        )
        loader = LoadingIndicator(classes="typeahead-loader")
        loader.display = False
        yield loader
        yield Vertical(classes=f"typeahead-results {styles.results_list}".strip())

    @property
    def input(self) -> TypeaheadInput:
        return self.query_one(TypeaheadInput)

    @property
    def results_panel(self) -> Vertical:
        return self.query_one(".typeahead-results", Vertical)

    def on_mount(self) -> None:
        bus = self.controller.event_bus
        bus.subscribe(StateChanged, self._on_state_changed)
        bus.subscribe(OptionSelected, self._on_option_selected)
        bus.subscribe(EntryCreated, self._on_entry_created)
        self.controller.watch_outside_clicks(self._contains)
        logger.debug(f"Typeahead '{self.config.id}' mounted")

    def on_unmount(self) -> None:
        bus = self.controller.event_bus
        bus.unsubscribe(StateChanged, self._on_state_changed)
        bus.unsubscribe(OptionSelected, self._on_option_selected)
        bus.unsubscribe(EntryCreated, self._on_entry_created)
        self.controller.teardown()

    # ------------------------------------------------------------------
    # Textual events -> controller
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        # Programmatic echoes of the controller's own query are not keystrokes
        if event.value != self.controller.query:
            self.controller.input_changed(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if self.commit_on_submit:
            self.controller.commit_free_text()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        self.controller.focus()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.controller.blur()

    def on_result_item_clicked(self, event: ResultItem.Clicked) -> None:
        event.stop()
        self.controller.select_option(event.option)
        self.input.focus()

    def on_result_item_hovered(self, event: ResultItem.Hovered) -> None:
        event.stop()
        self.controller.hover(event.option)

    def on_create_entry_button_clicked(self, event: CreateEntryButton.Clicked) -> None:
        event.stop()
        self.controller.create()

    # ------------------------------------------------------------------
    # Controller events -> rendering
    # ------------------------------------------------------------------

    def _contains(self, target: object) -> bool:
        if not isinstance(target, Widget):
            return False
        return target is self or self in target.ancestors

    def _on_option_selected(self, event: OptionSelected) -> None:
        if event.widget_id == self.config.id:
            self.post_message(self.Selected(self, event.option, event.value))

    def _on_entry_created(self, event: EntryCreated) -> None:
        if event.widget_id == self.config.id:
            self.post_message(self.Created(self, event.query))

    def _on_state_changed(self, event: StateChanged) -> None:
        # The bus may be shared with other typeaheads
        if event.widget_id == self.config.id and not self._render_scheduled:
            self._render_scheduled = True
            self.call_later(self._render_state)

    async def _render_state(self) -> None:
        self._render_scheduled = False
        if not self.is_attached:
            return

        controller = self.controller
        input_widget = self.input
        if input_widget.value != controller.query:
            input_widget.value = controller.query

        self.set_class(controller.visible, "-expanded")
        self.query_one(LoadingIndicator).display = controller.loading

        await self._render_rows()

    async def _render_rows(self) -> None:
        controller = self.controller
        panel = self.results_panel
        display_items = controller.display_items()
        show_create = controller.show_create_button
        signature = [(item.option.id, item.state) for item in display_items]
        signature.append(("__create__", controller.create_button_label if show_create else None))

        if signature != self._row_signature:
            self._row_signature = signature
            await panel.remove_children()
            rows: list[Widget] = [
                ResultItem(
                    item,
                    self._renderable_for(item.option),
                    controller.config.option_dom_id(item.option),
                    classes=f"typeahead-result {self.config.styles.result_item}".strip(),
                )
                for item in display_items
            ]
            if show_create:
                rows.append(
                    CreateEntryButton(
                        controller.create_button_label,
                        classes=f"typeahead-create {self.config.styles.create_button}".strip(),
                    )
                )
            if rows:
                await panel.mount_all(rows)

        active = controller.state.active_option
        for row in panel.query(ResultItem):
            is_active = active is not None and not row.item.is_exiting and row.option.id == active.id
            row.set_active(is_active)
            if is_active:
                row.scroll_visible()

    def _renderable_for(self, option: Option):
        """Host renderable for ``option``; plain strings get the query highlighted."""
        renderable = self.controller.render_item(option)
        if isinstance(renderable, str):
            text = Text(renderable)
            if self.controller.query:
                text.highlight_words([self.controller.query], style="bold underline", case_sensitive=False)
            return text
        return renderable
