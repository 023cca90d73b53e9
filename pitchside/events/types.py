"""Event types emitted by the layout store and loader."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class LoadStatus(Enum):
    """Roster load status shown in the UI header."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"  # loaded fine, no player rows
    FAILED = "failed"  # source unreachable; roster left empty


@dataclass
class LayoutEvent:
    """Base class for all layout events."""

    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class RosterLoadedEvent(LayoutEvent):
    """Fired after a new roster replaced the previous one."""

    entity_count: int = 0
    player_count: int = 0


@dataclass
class RosterClearedEvent(LayoutEvent):
    """Fired when the store is emptied (failed or empty load)."""

    pass


@dataclass
class EntityMovedEvent(LayoutEvent):
    """Fired on every move_entity command."""

    entity_id: Union[int, str, None] = None
    x: float = 0.0
    y: float = 0.0


@dataclass
class LoadStatusEvent(LayoutEvent):
    """Fired when the roster load status changes."""

    status: LoadStatus = LoadStatus.IDLE
    message: str = ""
    source: Optional[str] = None
