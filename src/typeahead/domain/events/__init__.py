"""Event system for decoupled component communication.

The core controller publishes events on an :class:`EventBus`; the Textual
widget subscribes to re-render, and hosts may subscribe to observe selections.

Example:
    ```python
    from typeahead.domain.events import EventBus, OptionSelected

    bus = EventBus()

    def handle_selected(event: OptionSelected):
        print(f"{event.widget_id} selected {event.value}")

    bus.subscribe(OptionSelected, handle_selected)
    ```
"""

from .bus import EventBus
from .types import (
    EntryCreated,
    Event,
    OptionSelected,
    PointerPressed,
    StateChanged,
)

__all__ = [
    "EventBus",
    "Event",
    "StateChanged",
    "OptionSelected",
    "EntryCreated",
    "PointerPressed",
]
