"""Shared layout state.

The store is the single owner of the board entities. Both views read from
it; the only writes are a whole-roster swap (load/clear) and the
move_entity command. Every write is announced on the store's event bus.
"""

import logging
from typing import Iterable, Optional

from pitchside.core.models.entity import Ball, Entity, EntityId, Player
from pitchside.events import (
    EntityMovedEvent,
    EventBus,
    RosterClearedEvent,
    RosterLoadedEvent,
)

logger = logging.getLogger(__name__)


class LayoutStore:
    """Mapping of entity id -> entity, in roster order with the ball last."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self.event_bus = event_bus or EventBus()
        self._entities: dict[EntityId, Entity] = {}
        self._version = 0

    # --- Reads ---

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    @property
    def version(self) -> int:
        """Incremented on every write."""
        return self._version

    @property
    def is_empty(self) -> bool:
        return not self._entities

    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    def players(self) -> list[Player]:
        return [e for e in self._entities.values() if isinstance(e, Player)]

    def ball(self) -> Optional[Ball]:
        for entity in self._entities.values():
            if isinstance(entity, Ball):
                return entity
        return None

    def get(self, entity_id: EntityId) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def snapshot(self) -> list[dict]:
        """Plain-dict copy of the current layout."""
        return [entity.to_dict() for entity in self._entities.values()]

    # --- Writes ---

    def load(self, entities: Iterable[Entity]) -> None:
        """
        Replace the whole roster in one step.

        The new sequence is built completely before it is swapped in, so
        readers never see a partial roster.
        """
        new_entities: dict[EntityId, Entity] = {}
        for entity in entities:
            new_entities[entity.id] = entity

        self._entities = new_entities
        self._version += 1

        player_count = sum(1 for e in new_entities.values() if isinstance(e, Player))
        logger.info("Roster loaded: %d players", player_count)
        self.event_bus.emit(
            RosterLoadedEvent(entity_count=len(new_entities), player_count=player_count)
        )

    def clear(self) -> None:
        """Drop every entity."""
        self._entities = {}
        self._version += 1
        self.event_bus.emit(RosterClearedEvent())

    def move_entity(self, entity_id: EntityId, x: float, y: float) -> bool:
        """
        Move an entity to new board coordinates.

        Only x and y are written; ordering and identity are untouched.

        Returns:
            True if the entity exists and was moved, False otherwise
        """
        entity = self._entities.get(entity_id)
        if entity is None:
            logger.debug("move_entity ignored for unknown id %r", entity_id)
            return False

        entity.x = float(x)
        entity.y = float(y)
        self._version += 1
        self.event_bus.emit(EntityMovedEvent(entity_id=entity_id, x=entity.x, y=entity.y))
        return True
