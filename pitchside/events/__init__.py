"""Event system for layout state changes."""

from pitchside.events.bus import EventBus
from pitchside.events.types import (
    EntityMovedEvent,
    LayoutEvent,
    LoadStatus,
    LoadStatusEvent,
    RosterClearedEvent,
    RosterLoadedEvent,
)

__all__ = [
    "EntityMovedEvent",
    "EventBus",
    "LayoutEvent",
    "LoadStatus",
    "LoadStatusEvent",
    "RosterClearedEvent",
    "RosterLoadedEvent",
]
