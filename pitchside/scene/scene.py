"""Scene view: turns the layout store into positioned 3D props.

The scene keeps no positions of its own. Whenever the store announces a
change it re-derives every prop from the store through the projector and
hands them to a render target, so it cannot drift from the board view.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from pitchside.core.colors import entity_color
from pitchside.core.config import ColorScheme, get_config
from pitchside.core.models.entity import Ball, Entity, EntityId, Player, WorldPoint
from pitchside.core.projector import DEFAULT_PROJECTOR, Projector
from pitchside.events import LayoutEvent
from pitchside.state.store import LayoutStore


PITCH_LENGTH = 100.0
PITCH_DEPTH = 70.0
CENTER_CIRCLE_RADIUS = 9.0
LINE_ELEVATION = 0.05

PLAYER_SCALE = 1.0
BALL_SCALE = 0.5


class PropShape(Enum):
    DISC_PILLAR = "disc_pillar"  # player: base disc with a pillar on top
    SPHERE = "sphere"  # ball


@dataclass(frozen=True)
class SceneProp:
    """One placed primitive, as handed to a render target."""

    entity_id: EntityId
    shape: PropShape
    position: WorldPoint
    color: str
    label: str = ""
    sublabel: str = ""
    scale: float = PLAYER_SCALE

    def to_dict(self) -> dict:
        return {
            "entity_id": self.entity_id,
            "shape": self.shape.value,
            "position": list(self.position),
            "color": self.color,
            "label": self.label,
            "sublabel": self.sublabel,
            "scale": self.scale,
        }


class RenderTarget(Protocol):
    """Scene-graph capability: place coloured, labelled primitives."""

    def clear(self) -> None:
        ...

    def place(self, prop: SceneProp) -> None:
        ...


def make_prop(entity: Entity, projector: Projector, colors: ColorScheme) -> SceneProp:
    """Build the prop for one entity."""
    position = projector.board_to_world(entity.position)
    color = entity_color(entity, colors)
    if isinstance(entity, Ball):
        return SceneProp(
            entity_id=entity.id,
            shape=PropShape.SPHERE,
            position=position,
            color=color,
            scale=BALL_SCALE,
        )
    if isinstance(entity, Player):
        return SceneProp(
            entity_id=entity.id,
            shape=PropShape.DISC_PILLAR,
            position=position,
            color=color,
            label=entity.number,
            sublabel=entity.name,
        )
    raise TypeError(f"Not a board entity: {entity!r}")


def pitch_outline(segments: int = 48) -> list[list[WorldPoint]]:
    """Touchline border, halfway line and centre circle as world polylines."""
    hx = PITCH_LENGTH / 2
    hz = PITCH_DEPTH / 2
    y = LINE_ELEVATION
    border = [
        WorldPoint(-hx, y, -hz),
        WorldPoint(hx, y, -hz),
        WorldPoint(hx, y, hz),
        WorldPoint(-hx, y, hz),
        WorldPoint(-hx, y, -hz),
    ]
    halfway = [WorldPoint(0.0, y, -hz), WorldPoint(0.0, y, hz)]
    circle = [
        WorldPoint(
            CENTER_CIRCLE_RADIUS * math.cos(2 * math.pi * i / segments),
            y,
            CENTER_CIRCLE_RADIUS * math.sin(2 * math.pi * i / segments),
        )
        for i in range(segments + 1)
    ]
    return [border, halfway, circle]


class SceneView:
    """Read-only consumer of a LayoutStore."""

    def __init__(
        self,
        store: LayoutStore,
        target: RenderTarget,
        projector: Projector = DEFAULT_PROJECTOR,
        colors: Optional[ColorScheme] = None,
    ) -> None:
        self.store = store
        self.target = target
        self.projector = projector
        self.colors = colors or get_config().colors
        self._attached = False

    def attach(self) -> None:
        """Subscribe to store changes and draw the current state."""
        if not self._attached:
            self.store.event_bus.subscribe_all(self._on_store_event)
            self._attached = True
        self.rebuild()

    def detach(self) -> None:
        if self._attached:
            self.store.event_bus.unsubscribe_all(self._on_store_event)
            self._attached = False

    def _on_store_event(self, event: LayoutEvent) -> None:
        self.rebuild()

    def props(self) -> list[SceneProp]:
        return [make_prop(entity, self.projector, self.colors) for entity in self.store.entities()]

    def rebuild(self) -> None:
        self.target.clear()
        for prop in self.props():
            self.target.place(prop)


class PropCollector:
    """Render target that just keeps the placed props (for the API)."""

    def __init__(self) -> None:
        self._props: list[SceneProp] = []

    @property
    def props(self) -> list[SceneProp]:
        return list(self._props)

    def clear(self) -> None:
        self._props = []

    def place(self, prop: SceneProp) -> None:
        self._props.append(prop)
