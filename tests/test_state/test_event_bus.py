"""Tests for the event bus."""

from pitchside.events import (
    EntityMovedEvent,
    EventBus,
    LayoutEvent,
    RosterClearedEvent,
    RosterLoadedEvent,
)


class TestEventBus:
    def test_typed_subscription(self):
        bus = EventBus()
        moves = []
        bus.subscribe(EntityMovedEvent, moves.append)
        bus.emit(EntityMovedEvent(entity_id=0, x=1, y=2))
        bus.emit(RosterLoadedEvent(entity_count=3))
        assert len(moves) == 1

    def test_global_handlers_run_after_typed(self):
        bus = EventBus()
        order = []
        bus.subscribe_all(lambda e: order.append("all"))
        bus.subscribe(RosterLoadedEvent, lambda e: order.append("typed"))
        bus.emit(RosterLoadedEvent())
        assert order == ["typed", "all"]

    def test_base_class_subscription_sees_every_event(self):
        bus = EventBus()
        seen = []
        bus.subscribe(LayoutEvent, seen.append)
        bus.emit(RosterLoadedEvent())
        bus.emit(RosterClearedEvent())
        assert [type(e) for e in seen] == [RosterLoadedEvent, RosterClearedEvent]

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        bus.subscribe(RosterLoadedEvent, seen.append)
        bus.subscribe_all(seen.append)
        bus.unsubscribe(RosterLoadedEvent, seen.append)
        bus.unsubscribe_all(seen.append)
        bus.emit(RosterLoadedEvent())
        assert seen == []

    def test_unsubscribe_unknown_handler(self):
        bus = EventBus()
        bus.unsubscribe(EntityMovedEvent, print)
        bus.unsubscribe_all(print)
        assert bus.handler_count() == 0

    def test_handler_count(self):
        bus = EventBus()
        bus.subscribe(RosterLoadedEvent, lambda e: None)
        bus.subscribe(EntityMovedEvent, lambda e: None)
        bus.subscribe_all(lambda e: None)
        assert bus.handler_count() == 1
        assert bus.handler_count(RosterLoadedEvent) == 2
        assert bus.handler_count(RosterClearedEvent) == 1

    def test_handler_may_unsubscribe_itself(self):
        bus = EventBus()
        calls = []

        def once(event):
            calls.append(event)
            bus.unsubscribe(RosterLoadedEvent, once)

        bus.subscribe(RosterLoadedEvent, once)
        bus.emit(RosterLoadedEvent())
        bus.emit(RosterLoadedEvent())
        assert len(calls) == 1
