"""Top-down tactical board with draggable markers."""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from rich.text import Text
from textual import events
from textual.reactive import reactive
from textual.widget import Widget

from pitchside.core.colors import entity_color
from pitchside.core.config import BoardConfig
from pitchside.core.models.entity import Ball, BoardPoint, Entity, EntityId
from pitchside.core.projector import Projector, ScreenRect
from pitchside.events import LayoutEvent
from pitchside.service import LayoutController
from pitchside.ui.cells import Grid, blank_grid, grid_to_text, put, put_text
from pitchside.ui.constants import (
    BENCH_BACKGROUND,
    BENCH_MARGIN,
    BOARD_BACKGROUND,
    CELL_ASPECT,
    LINE_COLOR,
    MAX_ZOOM,
    MIN_BOARD_EXTENT,
    MIN_ZOOM,
    PITCH_ASPECT,
    PITCH_COLOR,
    ZOOM_STEP,
)
from pitchside.ui.messages import DragEndedMessage, DragStartedMessage


STYLE_BOARD = f"on {BOARD_BACKGROUND}"
STYLE_PITCH = f"on {PITCH_COLOR}"
STYLE_LINE = f"{LINE_COLOR} on {PITCH_COLOR}"
STYLE_BORDER = f"#777777 on {BOARD_BACKGROUND}"
STYLE_BENCH = f"#666666 on {BENCH_BACKGROUND}"
STYLE_NAME = "#dddddd"

BOARD_MARGIN = 1


@dataclass(frozen=True)
class Marker:
    """Where an entity is drawn: `text` starting at (col, row)."""

    entity_id: EntityId
    col: int
    row: int
    text: str

    def contains(self, col: int, row: int) -> bool:
        return row == self.row and self.col <= col < self.col + len(self.text)


def board_extent(config: BoardConfig) -> float:
    """Board x range that keeps the whole starting bench visible."""
    bench = config.bench
    reach = bench.base_x
    if bench.policy == "grid":
        reach += (bench.columns - 1) * bench.col_spacing
    return max(MIN_BOARD_EXTENT, reach + BENCH_MARGIN)


def pitch_rect(width: int, height: int, extent: float, zoom: float = 1.0) -> ScreenRect:
    """
    Rectangle of the pitch in widget cells, at its rendered (zoomed) size.

    The pitch keeps its 100 x 70 proportions and leaves room on the right
    for the bench, which lives at board x in (100, extent].
    """
    avail_w = max(1.0, width - 2 * BOARD_MARGIN)
    avail_h = max(1.0, height - 2 * BOARD_MARGIN)

    pitch_w = avail_w * 100.0 / extent
    pitch_h = pitch_w * PITCH_ASPECT / CELL_ASPECT
    if pitch_h > avail_h:
        pitch_h = avail_h
        pitch_w = pitch_h * CELL_ASPECT / PITCH_ASPECT

    return ScreenRect(BOARD_MARGIN, BOARD_MARGIN, pitch_w, pitch_h).scaled(zoom)


def marker_for(entity: Entity, rect: ScreenRect) -> Marker:
    sx, sy = Projector.board_to_screen(entity.position, rect)
    col = math.floor(sx)
    row = math.floor(sy)
    text = "●" if isinstance(entity, Ball) else entity.label[:3]
    return Marker(entity.id, col - (len(text) - 1) // 2, row, text)


def hit_test(entities: Sequence[Entity], rect: ScreenRect, col: int, row: int) -> Optional[EntityId]:
    """Topmost entity drawn at a cell. Later entities are drawn on top."""
    for entity in reversed(entities):
        if marker_for(entity, rect).contains(col, row):
            return entity.id
    return None


class BoardView(Widget):
    """
    2D tactical board.

    Renders the pitch, the bench strip and one marker per entity. Mouse down
    on a marker starts a drag; every mouse move while dragging writes the
    entity's new position to the store; mouse up or leaving the board ends
    the drag.
    """

    DEFAULT_CSS = """
    BoardView {
        width: 1fr;
        height: 1fr;
    }
    """

    zoom: reactive[float] = reactive(1.0)

    def __init__(self, controller: LayoutController, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.extent = board_extent(controller.config)

    @property
    def store(self):
        return self.controller.store

    @property
    def drag(self):
        return self.controller.drag

    # --- Lifecycle ---

    def on_mount(self) -> None:
        self.store.event_bus.subscribe_all(self._on_store_event)

    def on_unmount(self) -> None:
        self.store.event_bus.unsubscribe_all(self._on_store_event)

    def _on_store_event(self, event: LayoutEvent) -> None:
        self.refresh()

    def watch_zoom(self, zoom: float) -> None:
        self.refresh()

    # --- Geometry ---

    def current_rect(self) -> ScreenRect:
        """Pitch rect for the size the widget is rendered at right now."""
        size = self.content_size
        return pitch_rect(size.width, size.height, self.extent, self.zoom)

    def zoom_in(self) -> None:
        self.zoom = min(MAX_ZOOM, round(self.zoom + ZOOM_STEP, 2))

    def zoom_out(self) -> None:
        self.zoom = max(MIN_ZOOM, round(self.zoom - ZOOM_STEP, 2))

    def reset_zoom(self) -> None:
        self.zoom = 1.0

    # --- Pointer input ---

    def on_mouse_down(self, event: events.MouseDown) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        entity_id = hit_test(self.store.entities(), self.current_rect(), offset.x, offset.y)
        if entity_id is not None and self.drag.pointer_down(entity_id):
            self.post_message(DragStartedMessage(entity_id))
            self.refresh()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if not self.drag.is_dragging:
            return
        offset = event.get_content_offset(self)
        if offset is None:
            return
        # Pointer taken at the centre of its cell
        self.drag.pointer_move(offset.x + 0.5, offset.y + 0.5, self.current_rect())

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self._end_drag()

    def on_leave(self, event: events.Leave) -> None:
        self._end_drag()

    def _end_drag(self) -> None:
        entity_id = self.drag.dragging_id
        if entity_id is None:
            return
        self.drag.pointer_up()
        self.post_message(DragEndedMessage(entity_id))
        self.refresh()

    # --- Rendering ---

    def render(self) -> Text:
        size = self.content_size
        grid = blank_grid(size.width, size.height, STYLE_BOARD)
        rect = self.current_rect()

        self._draw_bench(grid, rect)
        self._draw_pitch(grid, rect)

        if self.store.is_empty:
            msg = self.controller.status_message
            put_text(grid, max(0, (size.width - len(msg)) // 2), size.height // 2, msg, "italic #aaaaaa on #303030")
        else:
            self._draw_markers(grid, rect)

        return grid_to_text(grid)

    def _cell(self, point: BoardPoint, rect: ScreenRect) -> tuple[int, int]:
        sx, sy = Projector.board_to_screen(point, rect)
        return math.floor(sx), math.floor(sy)

    def _draw_pitch(self, grid: Grid, rect: ScreenRect) -> None:
        left, top = self._cell(BoardPoint(0, 0), rect)
        right, bottom = self._cell(BoardPoint(100, 100), rect)

        for row in range(top, bottom):
            for col in range(left, right):
                put(grid, col, row, " ", STYLE_PITCH)

        for col in range(left, right):
            put(grid, col, top - 1, "─", STYLE_BORDER)
            put(grid, col, bottom, "─", STYLE_BORDER)
        for row in range(top, bottom):
            put(grid, left - 1, row, "│", STYLE_BORDER)
            put(grid, right, row, "│", STYLE_BORDER)
        put(grid, left - 1, top - 1, "┌", STYLE_BORDER)
        put(grid, right, top - 1, "┐", STYLE_BORDER)
        put(grid, left - 1, bottom, "└", STYLE_BORDER)
        put(grid, right, bottom, "┘", STYLE_BORDER)

        mid_col, mid_row = self._cell(BoardPoint(50, 50), rect)
        for row in range(top, bottom):
            put(grid, mid_col, row, "│", STYLE_LINE)
        put(grid, mid_col, mid_row, "┼", STYLE_LINE)

        # Centre circle, radius 9 on a 100 x 70 pitch
        for step in range(48):
            angle = 2 * math.pi * step / 48
            point = BoardPoint(50 + 9 * math.cos(angle), 50 + 9 / PITCH_ASPECT * math.sin(angle))
            col, row = self._cell(point, rect)
            put(grid, col, row, "·", STYLE_LINE)

    def _draw_bench(self, grid: Grid, rect: ScreenRect) -> None:
        left, top = self._cell(BoardPoint(self.controller.config.bench.base_x - 3, 0), rect)
        right, bottom = self._cell(BoardPoint(self.extent - 2, 100), rect)
        for row in range(top, bottom):
            for col in range(left, right):
                char = "┆" if col in (left, right - 1) else " "
                put(grid, col, row, char, STYLE_BENCH)
        put_text(grid, left + max(0, (right - left - 5) // 2), top - 1, "BENCH", STYLE_BENCH)

    def _draw_markers(self, grid: Grid, rect: ScreenRect) -> None:
        colors = self.controller.config.colors
        for entity in self.store.entities():
            marker = marker_for(entity, rect)
            color = entity_color(entity, colors)
            dragging = self.drag.is_dragging_entity(entity.id)
            if isinstance(entity, Ball):
                style = f"bold {color}"
                keep_bg = True
            else:
                style = f"bold white on {color}"
                keep_bg = False
            if dragging:
                style += " reverse"
            put_text(grid, marker.col, marker.row, marker.text, style, keep_background=keep_bg)

            if not isinstance(entity, Ball):
                name = entity.name[:6]
                put_text(grid, marker.col + (len(marker.text) - len(name)) // 2, marker.row + 1, name, STYLE_NAME, keep_background=True)
