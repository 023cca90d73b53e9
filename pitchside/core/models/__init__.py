"""Board entity models."""

from pitchside.core.models.entity import (
    BALL_ID,
    Ball,
    BoardPoint,
    Entity,
    EntityId,
    Player,
    WorldPoint,
    is_ball,
)

__all__ = [
    "BALL_ID",
    "Ball",
    "BoardPoint",
    "Entity",
    "EntityId",
    "Player",
    "WorldPoint",
    "is_ball",
]
