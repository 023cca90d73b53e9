"""Perspective camera for drawing the scene onto a character grid."""

import math
from typing import Optional

import numpy as np

from pitchside.core.models.entity import WorldPoint


class PerspectiveCamera:
    """
    Look-at pinhole camera.

    Default pose: raised behind the near touchline,
    looking at the centre spot with a 45 degree vertical field of view.
    """

    def __init__(
        self,
        position: tuple[float, float, float] = (0.0, 60.0, 50.0),
        target: tuple[float, float, float] = (0.0, 0.0, 0.0),
        fov_degrees: float = 45.0,
        near: float = 0.1,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.target = np.array(target, dtype=float)
        self.fov_degrees = fov_degrees
        self.near = near
        self._view = self._look_at()

    def _look_at(self) -> np.ndarray:
        forward = self.target - self.position
        forward /= np.linalg.norm(forward)
        up = np.array([0.0, 1.0, 0.0])
        right = np.cross(forward, up)
        right /= np.linalg.norm(right)
        true_up = np.cross(right, forward)
        # Rows: camera right, up, forward
        return np.stack([right, true_up, forward])

    def to_camera(self, point: WorldPoint) -> np.ndarray:
        return self._view @ (np.array(point, dtype=float) - self.position)

    def project(self, point: WorldPoint, aspect: float) -> Optional[tuple[float, float, float]]:
        """
        World point -> normalized device coordinates.

        Returns:
            (ndc_x, ndc_y, depth) with ndc in [-1, 1] when on screen,
            or None if the point is behind the camera
        """
        cx, cy, depth = self.to_camera(point)
        if depth <= self.near:
            return None
        f = 1.0 / math.tan(math.radians(self.fov_degrees) / 2)
        return (f * cx / (depth * aspect), f * cy / depth, float(depth))

    def to_cell(
        self,
        point: WorldPoint,
        width: int,
        height: int,
        cell_aspect: float = 2.0,
    ) -> Optional[tuple[int, int, float]]:
        """
        World point -> (column, row, depth) on a width x height grid.

        cell_aspect is the height/width ratio of one terminal cell.
        """
        if width <= 0 or height <= 0:
            return None
        aspect = width / (height * cell_aspect)
        projected = self.project(point, aspect)
        if projected is None:
            return None
        ndc_x, ndc_y, depth = projected
        col = int(round((ndc_x + 1) / 2 * (width - 1)))
        row = int(round((1 - ndc_y) / 2 * (height - 1)))
        return col, row, depth
