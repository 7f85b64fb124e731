"""
Scoped outside-click subscription bound to a widget's mounted lifetime.
"""

from typing import Callable

from typeahead.domain.events import EventBus, PointerPressed
from typeahead.logger import get_logger

logger = get_logger("outside_click")


class OutsideClickSubscription:
    """
    Listen for :class:`PointerPressed` events while active.

    ``contains`` decides whether a press target lies inside the widget;
    ``on_outside`` runs for every press that does not. The subscription is
    registered on construction and removed by :meth:`close`, which is
    idempotent. It also works as a context manager.
    """

    def __init__(
        self,
        event_bus: EventBus,
        contains: Callable[[object], bool],
        on_outside: Callable[[], None],
    ):
        self._event_bus = event_bus
        self._contains = contains
        self._on_outside = on_outside
        self._active = True
        event_bus.subscribe(PointerPressed, self._handle)
        logger.debug("Outside-click subscription registered")

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        if self._active:
            self._active = False
            self._event_bus.unsubscribe(PointerPressed, self._handle)
            logger.debug("Outside-click subscription removed")

    def __enter__(self) -> "OutsideClickSubscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _handle(self, event: PointerPressed) -> None:
        if self._active and not self._contains(event.target):
            self._on_outside()
