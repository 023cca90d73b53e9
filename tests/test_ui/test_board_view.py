"""Pointer handling of the board widget, driven through a Textual pilot."""

import asyncio

import pytest
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from pitchside.core.projector import screen_to_board
from pitchside.ui.messages import DragEndedMessage, DragStartedMessage
from pitchside.ui.widgets.board_view import BoardView, marker_for


class BoardHarness(App):
    """A bare board beside a spare panel the pointer can leave to."""

    CSS = """
    BoardView {
        width: 80;
        height: 24;
    }

    #elsewhere {
        width: 1fr;
    }
    """

    def __init__(self, controller) -> None:
        super().__init__()
        self.controller = controller
        self.drag_log: list[tuple[str, object]] = []

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield BoardView(self.controller, id="board")
            yield Static("elsewhere", id="elsewhere")

    def on_drag_started_message(self, message: DragStartedMessage) -> None:
        self.drag_log.append(("start", message.entity_id))

    def on_drag_ended_message(self, message: DragEndedMessage) -> None:
        self.drag_log.append(("end", message.entity_id))


def run_scenario(controller, scenario) -> BoardHarness:
    app = BoardHarness(controller)

    async def main() -> None:
        async with app.run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            await scenario(app, pilot)

    asyncio.run(main())
    return app


class TestBoardViewDrag:
    def test_press_move_release(self, loaded_controller):
        """Pick up entity 0, move it, release: it lands under the pointer."""
        store = loaded_controller.store
        seen = {}

        async def scenario(app, pilot):
            board = app.query_one(BoardView)
            rect = board.current_rect()
            marker = marker_for(store.get(0), rect)

            await pilot.mouse_down("#board", offset=(marker.col, marker.row))
            await pilot.pause()
            seen["dragging"] = loaded_controller.drag.is_dragging_entity(0)

            await pilot.hover("#board", offset=(40, 12))
            await pilot.pause()
            seen["expected"] = screen_to_board(40.5, 12.5, rect)

            await pilot.mouse_up("#board", offset=(40, 12))
            await pilot.pause()

        app = run_scenario(loaded_controller, scenario)

        assert seen["dragging"]
        assert store.get(0).position == pytest.approx(seen["expected"])
        assert not loaded_controller.drag.is_dragging
        assert app.drag_log == [("start", 0), ("end", 0)]

    def test_leaving_board_ends_drag(self, loaded_controller):
        store = loaded_controller.store
        start = store.get(0).position

        async def scenario(app, pilot):
            marker = marker_for(store.get(0), app.query_one(BoardView).current_rect())
            await pilot.mouse_down("#board", offset=(marker.col, marker.row))
            await pilot.pause()
            await pilot.hover("#elsewhere", offset=(2, 2))
            await pilot.pause()

        app = run_scenario(loaded_controller, scenario)

        assert not loaded_controller.drag.is_dragging
        assert app.drag_log == [("start", 0), ("end", 0)]
        assert store.get(0).position == pytest.approx(start)

    def test_zoomed_board_tracks_pointer(self, loaded_controller):
        store = loaded_controller.store
        seen = {}

        async def scenario(app, pilot):
            board = app.query_one(BoardView)
            board.zoom_in()
            board.zoom_in()
            await pilot.pause()
            rect = board.current_rect()
            seen["rect"] = rect
            marker = marker_for(store.get(0), rect)

            await pilot.mouse_down("#board", offset=(marker.col, marker.row))
            await pilot.hover("#board", offset=(30, 15))
            await pilot.pause()
            seen["expected"] = screen_to_board(30.5, 15.5, rect)
            await pilot.mouse_up("#board", offset=(30, 15))
            await pilot.pause()

        run_scenario(loaded_controller, scenario)

        assert seen["rect"].width > 62.4
        assert store.get(0).position == pytest.approx(seen["expected"])

    def test_press_on_empty_pitch_does_nothing(self, loaded_controller):
        before = loaded_controller.store.snapshot()

        async def scenario(app, pilot):
            await pilot.mouse_down("#board", offset=(78, 22))
            await pilot.hover("#board", offset=(20, 5))
            await pilot.mouse_up("#board", offset=(20, 5))
            await pilot.pause()

        app = run_scenario(loaded_controller, scenario)

        assert app.drag_log == []
        assert loaded_controller.store.snapshot() == before
