"""Event bus between the layout store and the views that follow it."""

from collections import defaultdict
from typing import Callable, TypeVar

from pitchside.events.types import LayoutEvent

T = TypeVar("T", bound=LayoutEvent)
EventHandler = Callable[[LayoutEvent], None]


class EventBus:
    """
    Synchronous pub/sub keyed by event class.

    A handler subscribed to a class also receives its subclasses, so
    subscribing to LayoutEvent (what subscribe_all does) sees everything.
    Delivery goes from the most specific class to LayoutEvent, and within
    one class in subscription order.

    Example:
        bus = EventBus()
        bus.subscribe(EntityMovedEvent, lambda e: print(e.entity_id, e.x, e.y))
        bus.emit(EntityMovedEvent(entity_id=3, x=40, y=60))
    """

    def __init__(self) -> None:
        self._handlers: dict[type[LayoutEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self.subscribe(LayoutEvent, handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        self.unsubscribe(LayoutEvent, handler)

    def emit(self, event: LayoutEvent) -> None:
        for event_type in type(event).__mro__:
            handlers = self._handlers.get(event_type)
            if handlers:
                # Copy: a handler may unsubscribe itself
                for handler in list(handlers):
                    handler(event)
            if event_type is LayoutEvent:
                break

    def handler_count(self, event_type: type[LayoutEvent] = LayoutEvent) -> int:
        """Handlers that would see an event of this type."""
        return sum(len(self._handlers.get(cls, ())) for cls in event_type.__mro__)
