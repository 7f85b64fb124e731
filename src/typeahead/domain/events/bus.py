"""Event bus implementation for decoupled event-driven communication.

The EventBus allows components to publish and subscribe to events without
direct coupling. The core controller publishes state changes; the UI layer
subscribes to them. Hosts publish pointer presses that controllers listen to
while mounted.

Event Handler Contract:
    Event handlers MUST be synchronous (non-async) functions. This is enforced
    at subscription time. Handlers should be fast coordinators that schedule
    async work rather than executing it directly.
"""

import asyncio
from typing import Callable, Type, TypeVar

from typeahead.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Event bus for publishing and subscribing to events.

    Thread safety:
        This implementation is NOT thread-safe. It assumes all operations
        happen within the same async event loop.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}
        """Registry of event handlers by event type."""

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to (e.g., StateChanged)
            handler: Synchronous callback receiving the event instance

        Raises:
            TypeError: If handler is an async function (coroutine function)
        """
        if asyncio.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is an async function (coroutine function). "
                f"To perform async work, schedule it using asyncio.create_task() instead."
            )

        handlers = self._handlers.setdefault(event_type, [])

        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Unsubscribe a handler from events of a specific type.

        If the handler was not subscribed, this is a no-op.
        """
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Handlers are called synchronously in the order they were subscribed.
        If a handler raises an exception, it is logged and does not prevent
        other handlers from being called.
        """
        event_type = type(event)
        # Copy: handlers may unsubscribe themselves while being notified
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers subscribed for {event_type.__name__}")
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.opt(exception=e).error(f"Error in event handler for {event_type.__name__}: {e}")

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        """Check if there are any subscribers for a specific event type."""
        return bool(self._handlers.get(event_type))
