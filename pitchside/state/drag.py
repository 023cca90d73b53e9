"""Drag state machine for the board view.

    IDLE --pointer_down(id)--> DRAGGING(id)
    DRAGGING --pointer_move--> DRAGGING (writes the entity's x, y)
    DRAGGING --pointer_up / pointer_leave--> IDLE

Entity ids can be 0, so "is anything being dragged" is always an explicit
None check, never a truthiness test.
"""

from enum import Enum, auto
from typing import Optional

from pitchside.core.models.entity import BoardPoint, EntityId
from pitchside.core.projector import DEFAULT_PROJECTOR, Projector, ScreenRect
from pitchside.state.store import LayoutStore


class DragPhase(Enum):
    IDLE = auto()
    DRAGGING = auto()


class DragController:
    """Turns pointer events into move_entity commands on a LayoutStore."""

    def __init__(self, store: LayoutStore, projector: Projector = DEFAULT_PROJECTOR) -> None:
        self.store = store
        self.projector = projector
        self._dragging_id: Optional[EntityId] = None

    @property
    def phase(self) -> DragPhase:
        if self._dragging_id is None:
            return DragPhase.IDLE
        return DragPhase.DRAGGING

    @property
    def dragging_id(self) -> Optional[EntityId]:
        return self._dragging_id

    @property
    def is_dragging(self) -> bool:
        return self._dragging_id is not None

    def is_dragging_entity(self, entity_id: EntityId) -> bool:
        return self._dragging_id is not None and self._dragging_id == entity_id

    def pointer_down(self, entity_id: EntityId) -> bool:
        """Start dragging an entity. Unknown ids leave the controller idle."""
        if entity_id not in self.store:
            return False
        self._dragging_id = entity_id
        return True

    def pointer_move(self, pointer_x: float, pointer_y: float, rect: ScreenRect) -> Optional[BoardPoint]:
        """
        Move the dragged entity under the pointer.

        Returns:
            The new board position, or None when no drag is in progress
        """
        if self._dragging_id is None:
            return None
        point = self.projector.screen_to_board(pointer_x, pointer_y, rect)
        if not self.store.move_entity(self._dragging_id, point.x, point.y):
            # Entity vanished (roster reloaded mid-drag)
            self._dragging_id = None
            return None
        return point

    def pointer_up(self) -> None:
        self._dragging_id = None

    def pointer_leave(self) -> None:
        self._dragging_id = None

    def cancel(self) -> None:
        self._dragging_id = None
