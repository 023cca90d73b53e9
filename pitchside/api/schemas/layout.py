"""Pydantic schemas for layout and scene payloads."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class EntitySchema(BaseModel):
    """A board entity (player or ball)."""

    id: Union[int, str]
    kind: str
    x: float
    y: float

    # Player only
    name: Optional[str] = None
    number: Optional[str] = None
    grade: Optional[int] = None
    role: Optional[str] = None
    color: str = ""

    @classmethod
    def from_model(cls, entity, color: str = "") -> "EntitySchema":
        return cls(**entity.to_dict(), color=color)


class LayoutSchema(BaseModel):
    """Whole board state."""

    status: str
    message: str
    version: int
    entities: list[EntitySchema] = []


class MoveRequest(BaseModel):
    """Move command for one entity."""

    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)


class RosterTextRequest(BaseModel):
    """Raw sheet text to parse and lay out."""

    text: str = Field(..., description="Newline-delimited CSV, first line is a header")


class RosterReloadRequest(BaseModel):
    """Reload from a URL (or the configured sheet URL when omitted)."""

    url: Optional[str] = None


class ScenePropSchema(BaseModel):
    """A projected 3D prop."""

    entity_id: Union[int, str]
    shape: str
    position: list[float]
    color: str
    label: str = ""
    sublabel: str = ""
    scale: float = 1.0

    @classmethod
    def from_model(cls, prop) -> "ScenePropSchema":
        return cls(**prop.to_dict())


class WSMessageType(str, Enum):
    """WebSocket message types."""

    # Server -> Client
    STATE_SYNC = "state_sync"
    ENTITY_MOVED = "entity_moved"
    STATUS = "status"
    ERROR = "error"

    # Client -> Server
    MOVE = "move"
    REQUEST_SYNC = "request_sync"


class WSMessage(BaseModel):
    """Envelope for every WebSocket message."""

    type: WSMessageType
    payload: dict[str, Any] = {}

    @classmethod
    def error(cls, message: str, code: str = "ERROR") -> "WSMessage":
        return cls(type=WSMessageType.ERROR, payload={"message": message, "code": code})
