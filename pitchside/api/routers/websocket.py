"""WebSocket router for live layout updates."""

import json
import math

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from pitchside.api.schemas.layout import WSMessage, WSMessageType
from pitchside.api.services.layout_service import layout_service, parse_entity_id

router = APIRouter(tags=["websocket"])


@router.websocket("/ws/layout")
async def layout_websocket(websocket: WebSocket) -> None:
    """
    WebSocket endpoint for the shared board.

    Clients get a state sync on connect and then every change. They can
    send move commands and ask for a resync.
    """
    await websocket.accept()
    layout_service.connect(websocket)

    try:
        await websocket.send_json(layout_service.state_sync().model_dump(mode="json"))

        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await websocket.send_json(
                    WSMessage.error("Invalid JSON", "INVALID_JSON").model_dump(mode="json")
                )
                continue
            await _handle_client_message(websocket, message)

    except WebSocketDisconnect:
        pass
    finally:
        layout_service.disconnect(websocket)


async def _handle_client_message(websocket: WebSocket, message: dict) -> None:
    """Handle incoming client WebSocket message."""
    msg_type = message.get("type") if isinstance(message, dict) else None

    if msg_type == WSMessageType.MOVE.value:
        payload = message.get("payload") or {}
        try:
            entity_id = parse_entity_id(payload["id"])
            x = float(payload["x"])
            y = float(payload["y"])
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError("coordinates must be finite")
        except (KeyError, TypeError, ValueError):
            await websocket.send_json(
                WSMessage.error("move needs an id and finite x, y", "INVALID_MOVE").model_dump(mode="json")
            )
            return
        if not layout_service.controller.store.move_entity(entity_id, x, y):
            await websocket.send_json(
                WSMessage.error(f"Entity {entity_id} not found", "NOT_FOUND").model_dump(mode="json")
            )

    elif msg_type == WSMessageType.REQUEST_SYNC.value:
        await websocket.send_json(layout_service.state_sync().model_dump(mode="json"))

    else:
        await websocket.send_json(
            WSMessage.error(f"Unknown message type: {msg_type}", "UNKNOWN_TYPE").model_dump(mode="json")
        )
