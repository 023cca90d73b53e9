"""Render target that rasterizes scene props onto a character grid."""

from typing import Callable, Optional

from rich.text import Text

from pitchside.core.models.entity import WorldPoint
from pitchside.scene.camera import PerspectiveCamera
from pitchside.scene.scene import PropShape, SceneProp, pitch_outline
from pitchside.ui.cells import Grid, blank_grid, grid_to_text, put, put_text


BACKGROUND = "#252525"
STYLE_BACKGROUND = f"on {BACKGROUND}"
STYLE_LINE = f"#8fbf9f on {BACKGROUND}"
STYLE_LABEL = f"bold white on {BACKGROUND}"
STYLE_NAME = f"#cccccc on {BACKGROUND}"

PILLAR_HEIGHT = 3.0
LINE_STEPS = 160


class TextRenderTarget:
    """
    Collects props and draws them with a PerspectiveCamera.

    `on_change` is called after every clear/place so a widget can refresh.
    """

    def __init__(
        self,
        camera: Optional[PerspectiveCamera] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.camera = camera or PerspectiveCamera()
        self.on_change = on_change
        self._props: list[SceneProp] = []
        self._outline = pitch_outline()

    @property
    def props(self) -> list[SceneProp]:
        return list(self._props)

    def clear(self) -> None:
        self._props = []
        self._changed()

    def place(self, prop: SceneProp) -> None:
        self._props.append(prop)
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def render(self, width: int, height: int) -> Text:
        if width <= 0 or height <= 0:
            return Text()
        grid = blank_grid(width, height, STYLE_BACKGROUND)

        for polyline in self._outline:
            self._draw_polyline(grid, polyline, width, height)

        # Far props first so near ones overwrite them
        placed = []
        for prop in self._props:
            cell = self.camera.to_cell(prop.position, width, height)
            if cell is not None:
                placed.append((cell[2], prop, cell[0], cell[1]))
        placed.sort(key=lambda item: -item[0])

        for _, prop, col, row in placed:
            self._draw_prop(grid, prop, col, row, width, height)

        return grid_to_text(grid)

    def _draw_polyline(self, grid: Grid, points: list[WorldPoint], width: int, height: int) -> None:
        for start, end in zip(points, points[1:]):
            for step in range(LINE_STEPS + 1):
                t = step / LINE_STEPS
                point = WorldPoint(
                    start.x + (end.x - start.x) * t,
                    start.y + (end.y - start.y) * t,
                    start.z + (end.z - start.z) * t,
                )
                cell = self.camera.to_cell(point, width, height)
                if cell is not None:
                    put(grid, cell[0], cell[1], "·", STYLE_LINE)

    def _draw_prop(self, grid: Grid, prop: SceneProp, col: int, row: int, width: int, height: int) -> None:
        style = f"{prop.color} on {BACKGROUND}"
        if prop.shape is PropShape.SPHERE:
            put(grid, col, row, "●", f"bold {style}")
            return

        # Base disc, then the pillar up to its projected top
        for dc in (-1, 0, 1):
            put(grid, col + dc, row, "▀", style)

        base = prop.position
        top = self.camera.to_cell(
            WorldPoint(base.x, base.y + PILLAR_HEIGHT * prop.scale, base.z), width, height
        )
        top_row = min(top[1], row - 1) if top is not None else row - 1
        for r in range(top_row, row):
            put(grid, col, r, "█", style)

        label_row = top_row - 1
        if prop.label:
            put_text(grid, col - len(prop.label) // 2, label_row, prop.label, STYLE_LABEL)
        if prop.sublabel:
            name = prop.sublabel[:8]
            put_text(grid, col - len(name) // 2, label_row - 1, name, STYLE_NAME)
