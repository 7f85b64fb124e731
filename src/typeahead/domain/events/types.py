"""Event types for the event bus system."""

import time
from dataclasses import dataclass, field

from typeahead.domain.types import Option, OptionId


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class StateChanged(Event):
    """Published by a controller whenever anything the renderer shows changed.

    Attributes:
        widget_id: Configured id of the typeahead that changed
        reason: Short tag of what triggered the change (``"results"``,
            ``"navigate"``, ``"visibility"``, ``"settled"``...)
    """

    widget_id: str
    reason: str


@dataclass
class OptionSelected(Event):
    """Published after the host ``on_select`` callback ran for an option."""

    widget_id: str
    option: Option
    value: str

    @property
    def option_id(self) -> OptionId:
        return self.option.id


@dataclass
class EntryCreated(Event):
    """Published after the host ``on_create`` callback ran."""

    widget_id: str
    query: str


@dataclass
class PointerPressed(Event):
    """Published by the host screen for every pointer press.

    ``target`` is whatever the host uses to identify the pressed element;
    each typeahead decides whether it lies inside its own container.
    """

    target: object
