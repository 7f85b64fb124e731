"""
Widgets for a single result row and the create affordance.
"""

from __future__ import annotations

from textual import events
from textual.message import Message
from textual.widgets import Static

from typeahead.domain.types import AnimationState, DisplayItem, Option
from typeahead.logger import get_logger

logger = get_logger("result_item")

STAGGER_STEP = 0.05
TRANSITION_DURATION = 0.3


class ResultItem(Static):
    """One row of the result panel (``role=option``)."""

    DEFAULT_CSS = """
    ResultItem {
        height: auto;
        padding: 0 1;
    }

    ResultItem:hover {
        background: $boost;
    }

    ResultItem.-active {
        background: $accent;
        text-style: bold;
    }

    ResultItem.-exiting {
        color: $text-muted;
    }
    """

    class Clicked(Message):
        """Posted when a non-exiting row is clicked."""

        def __init__(self, option: Option) -> None:
            super().__init__()
            self.option = option

    class Hovered(Message):
        """Posted when the pointer enters a non-exiting row."""

        def __init__(self, option: Option) -> None:
            super().__init__()
            self.option = option

    def __init__(self, item: DisplayItem, renderable, dom_option_id: str, **kwargs) -> None:
        super().__init__(renderable, **kwargs)
        self.item = item
        self.dom_option_id = dom_option_id
        self.add_class(f"-{item.state.value}")

    @property
    def option(self) -> Option:
        return self.item.option

    @property
    def stagger_delay(self) -> float:
        """Delay before an entering row fades in, by its position in the results."""
        if self.item.state is AnimationState.ENTERING:
            return self.item.stagger * STAGGER_STEP
        return 0.0

    def set_active(self, active: bool) -> None:
        self.set_class(active, "-active")

    def on_mount(self) -> None:
        if self.item.state is AnimationState.ENTERING:
            self.styles.opacity = 0.0
            self.styles.animate("opacity", value=1.0, duration=TRANSITION_DURATION, delay=self.stagger_delay)
        elif self.item.state is AnimationState.EXITING:
            self.styles.animate("opacity", value=0.0, duration=TRANSITION_DURATION)

    def on_click(self, event: events.Click) -> None:
        if self.item.is_exiting:
            return
        event.stop()
        self.post_message(self.Clicked(self.option))

    def on_enter(self, event: events.Enter) -> None:
        if not self.item.is_exiting:
            self.post_message(self.Hovered(self.option))


class CreateEntryButton(Static):
    """Inline "create new entry" affordance shown when nothing matches."""

    DEFAULT_CSS = """
    CreateEntryButton {
        height: auto;
        padding: 0 1;
        color: $success;
        text-style: italic;
    }

    CreateEntryButton:hover {
        background: $boost;
    }
    """

    class Clicked(Message):
        """Posted when the create affordance is clicked."""

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Clicked())
