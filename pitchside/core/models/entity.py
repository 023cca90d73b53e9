"""Entities placed on the tactical board.

A board holds two kinds of entity: players parsed from the roster and the
single synthetic ball. They are separate types rather than one record with
a magic grade value, so anything that colours or shapes an entity has to
handle both cases explicitly.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Union


BALL_ID = "ball"

DEFAULT_NAME = "unregistered"
DEFAULT_NUMBER = "?"
DEFAULT_GRADE = 1
DEFAULT_ROLE = "PLY"


class BoardPoint(NamedTuple):
    """Normalized board coordinate (percent of pitch width/height)."""

    x: float
    y: float


class WorldPoint(NamedTuple):
    """3D world coordinate. y is up."""

    x: float
    y: float
    z: float


@dataclass
class Player:
    """
    A roster row placed on the board.

    Only x and y change after creation; they are rewritten on every drag move.
    """

    id: int
    name: str = DEFAULT_NAME
    number: str = DEFAULT_NUMBER
    grade: Optional[int] = DEFAULT_GRADE  # None = unclassified
    role: str = DEFAULT_ROLE
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> BoardPoint:
        return BoardPoint(self.x, self.y)

    @property
    def label(self) -> str:
        """Short marker label (jersey number)."""
        return self.number

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": "player",
            "name": self.name,
            "number": self.number,
            "grade": self.grade,
            "role": self.role,
            "x": self.x,
            "y": self.y,
        }


@dataclass
class Ball:
    """The match ball. Exactly one per loaded roster, always last."""

    id: str = field(default=BALL_ID)
    x: float = 50.0
    y: float = 50.0

    @property
    def position(self) -> BoardPoint:
        return BoardPoint(self.x, self.y)

    @property
    def name(self) -> str:
        return "Ball"

    @property
    def label(self) -> str:
        return ""

    def to_dict(self) -> dict:
        return {"id": self.id, "kind": "ball", "x": self.x, "y": self.y}


Entity = Union[Player, Ball]
EntityId = Union[int, str]


def is_ball(entity: Entity) -> bool:
    """True for the synthetic ball entity."""
    return isinstance(entity, Ball)
