"""Coordinate projector shared by the board view and the 3D scene.

Board space is percent of the pitch rectangle: (0, 0) top-left, (100, 100)
bottom-right, bench at x > 100. World space centres the pitch on the
origin, x to the right, z toward the viewer, y up. The pitch is wider than
it is deep, so the depth axis is scaled (0.7 for a 100 x 70 pitch).

All functions here are pure.
"""

from dataclasses import dataclass

from pitchside.core.models.entity import BoardPoint, WorldPoint


PITCH_CENTER = 50.0
DEFAULT_DEPTH_SCALE = 0.7


@dataclass(frozen=True)
class ScreenRect:
    """
    Bounding rectangle of the rendered pitch, in pointer coordinates.

    Must describe the pitch element itself (not its container), at its
    rendered size, or the dragged marker will trail the pointer.
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def scaled(self, zoom: float) -> "ScreenRect":
        """Rect as rendered under a uniform zoom about its top-left corner."""
        return ScreenRect(self.left, self.top, self.width * zoom, self.height * zoom)


@dataclass(frozen=True)
class Projector:
    """Board <-> world mapping plus the pointer -> board mapping."""

    center_x: float = PITCH_CENTER
    center_y: float = PITCH_CENTER
    depth_scale: float = DEFAULT_DEPTH_SCALE

    def board_to_world(self, point: BoardPoint, elevation: float = 0.0) -> WorldPoint:
        return WorldPoint(
            point.x - self.center_x,
            elevation,
            (point.y - self.center_y) * self.depth_scale,
        )

    def world_to_board(self, point: WorldPoint) -> BoardPoint:
        return BoardPoint(
            point.x + self.center_x,
            point.z / self.depth_scale + self.center_y,
        )

    @staticmethod
    def screen_to_board(pointer_x: float, pointer_y: float, rect: ScreenRect) -> BoardPoint:
        """Pointer position -> board percent, relative to the pitch rect."""
        if rect.width <= 0 or rect.height <= 0:
            return BoardPoint(PITCH_CENTER, PITCH_CENTER)
        return BoardPoint(
            (pointer_x - rect.left) / rect.width * 100.0,
            (pointer_y - rect.top) / rect.height * 100.0,
        )

    @staticmethod
    def board_to_screen(point: BoardPoint, rect: ScreenRect) -> tuple[float, float]:
        """Board percent -> pointer position inside (or right of) the pitch rect."""
        return (
            rect.left + point.x / 100.0 * rect.width,
            rect.top + point.y / 100.0 * rect.height,
        )


DEFAULT_PROJECTOR = Projector()


def board_to_world(point: BoardPoint, depth_scale: float = DEFAULT_DEPTH_SCALE) -> WorldPoint:
    return Projector(depth_scale=depth_scale).board_to_world(point)


def screen_to_board(pointer_x: float, pointer_y: float, rect: ScreenRect) -> BoardPoint:
    return Projector.screen_to_board(pointer_x, pointer_y, rect)
