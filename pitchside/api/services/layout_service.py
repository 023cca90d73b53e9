"""
Layout service shared by the REST and WebSocket routers.

Wraps one LayoutController, keeps a scene view of its store for the /scene
endpoint, and fans store events out to connected WebSocket clients.
"""

import asyncio
import logging
from typing import Optional, Union

from fastapi import WebSocket

from pitchside.api.schemas.layout import (
    EntitySchema,
    LayoutSchema,
    ScenePropSchema,
    WSMessage,
    WSMessageType,
)
from pitchside.core.colors import entity_color
from pitchside.events import (
    EntityMovedEvent,
    LayoutEvent,
    LoadStatusEvent,
    RosterClearedEvent,
    RosterLoadedEvent,
)
from pitchside.scene.scene import PropCollector, SceneView
from pitchside.service import LayoutController

logger = logging.getLogger(__name__)


def parse_entity_id(raw: str) -> Union[int, str]:
    """Path/JSON id -> store key. Player ids are ints, the ball id is a string."""
    text = str(raw).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    return text


class LayoutService:
    """Single-board service; one instance per API process."""

    def __init__(self, controller: Optional[LayoutController] = None) -> None:
        self._connections: set[WebSocket] = set()
        self._pending: set[asyncio.Task] = set()
        self.scene: Optional[SceneView] = None
        self.bind(controller or LayoutController())

    def bind(self, controller: LayoutController) -> None:
        """Serve a different controller (used by the CLI and tests)."""
        if self.scene is not None:
            self.scene.detach()
            self.controller.event_bus.unsubscribe_all(self._on_event)
        self.controller = controller
        self.props = PropCollector()
        self.scene = SceneView(
            controller.store,
            self.props,
            projector=controller.projector,
            colors=controller.config.colors,
        )
        self.scene.attach()
        controller.event_bus.subscribe_all(self._on_event)

    # --- Snapshots ---

    def layout(self) -> LayoutSchema:
        colors = self.controller.config.colors
        return LayoutSchema(
            status=self.controller.status.value,
            message=self.controller.status_message,
            version=self.controller.store.version,
            entities=[
                EntitySchema.from_model(e, entity_color(e, colors))
                for e in self.controller.store.entities()
            ],
        )

    def scene_props(self) -> list[ScenePropSchema]:
        return [ScenePropSchema.from_model(p) for p in self.props.props]

    def state_sync(self) -> WSMessage:
        return WSMessage(type=WSMessageType.STATE_SYNC, payload=self.layout().model_dump(mode="json"))

    # --- WebSocket fan-out ---

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def connect(self, websocket: WebSocket) -> None:
        self._connections.add(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        self._connections.discard(websocket)

    def _message_for(self, event: LayoutEvent) -> Optional[WSMessage]:
        if isinstance(event, EntityMovedEvent):
            return WSMessage(
                type=WSMessageType.ENTITY_MOVED,
                payload={"id": event.entity_id, "x": event.x, "y": event.y},
            )
        if isinstance(event, (RosterLoadedEvent, RosterClearedEvent)):
            return self.state_sync()
        if isinstance(event, LoadStatusEvent):
            return WSMessage(
                type=WSMessageType.STATUS,
                payload={"status": event.status.value, "message": event.message},
            )
        return None

    def _on_event(self, event: LayoutEvent) -> None:
        if not self._connections:
            return
        message = self._message_for(event)
        if message is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Store changed outside the event loop; clients resync on request
            return
        task = loop.create_task(self.broadcast(message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def broadcast(self, message: WSMessage) -> None:
        data = message.model_dump(mode="json")
        for websocket in list(self._connections):
            try:
                await websocket.send_json(data)
            except Exception as e:
                logger.info("Dropping websocket client: %s", e)
                self.disconnect(websocket)


layout_service = LayoutService()
