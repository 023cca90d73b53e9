"""Main Pitchside TUI application."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static

from pitchside.core.models.entity import Player
from pitchside.events import LoadStatusEvent
from pitchside.service import LayoutController
from pitchside.sources import RosterSource
from pitchside.ui.messages import DragEndedMessage, DragStartedMessage
from pitchside.ui.widgets.board_view import BoardView
from pitchside.ui.widgets.scene_panel import ScenePanel


class PitchsideApp(App):
    """Tactical board and 3D scene side by side over one layout store."""

    TITLE = "Pitchside"
    SUB_TITLE = "Tactics 3D"

    CSS = """
    Screen {
        background: #1d1d1d;
    }

    #panels {
        height: 1fr;
    }

    #board, #scene {
        border: solid #111111;
        background: #303030;
        border-title-color: #aaaaaa;
    }

    #status {
        height: 1;
        padding: 0 1;
        background: #2b2b2b;
        color: #888888;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
        Binding("r", "reload", "Reload roster", show=True),
        Binding("plus", "zoom_in", "Zoom in", show=True),
        Binding("equal", "zoom_in", "Zoom in", show=False),
        Binding("minus", "zoom_out", "Zoom out", show=True),
        Binding("0", "reset_zoom", "Reset zoom", show=False),
    ]

    def __init__(
        self,
        controller: Optional[LayoutController] = None,
        source: Optional[RosterSource] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.controller = controller or LayoutController()
        self.source = source

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="panels"):
            yield BoardView(self.controller, id="board")
            yield ScenePanel(self.controller, id="scene")
        yield Static(self.controller.status_message, id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#board", BoardView).border_title = "Tactical Board"
        self.query_one("#scene", ScenePanel).border_title = "3D Simulation"
        self.controller.event_bus.subscribe(LoadStatusEvent, self._on_load_status)
        self.action_reload()

    def on_unmount(self) -> None:
        self.controller.event_bus.unsubscribe(LoadStatusEvent, self._on_load_status)

    def _on_load_status(self, event: LoadStatusEvent) -> None:
        self._set_status(event.message)

    def _set_status(self, text: str) -> None:
        self.query_one("#status", Static).update(text)

    # --- Actions ---

    def action_reload(self) -> None:
        """Fetch the roster again; the current layout is replaced wholesale."""
        if self.source is None:
            return
        self.run_worker(self.controller.load(self.source), exclusive=True, group="roster")

    def action_zoom_in(self) -> None:
        self.query_one("#board", BoardView).zoom_in()

    def action_zoom_out(self) -> None:
        self.query_one("#board", BoardView).zoom_out()

    def action_reset_zoom(self) -> None:
        self.query_one("#board", BoardView).reset_zoom()

    # --- Board messages ---

    def on_drag_started_message(self, message: DragStartedMessage) -> None:
        entity = self.controller.store.get(message.entity_id)
        if isinstance(entity, Player):
            self._set_status(f"Moving #{entity.number} {entity.name}")
        else:
            self._set_status("Moving ball")

    def on_drag_ended_message(self, message: DragEndedMessage) -> None:
        entity = self.controller.store.get(message.entity_id)
        if entity is None:
            self._set_status(self.controller.status_message)
            return
        self._set_status(f"{entity.name} at ({entity.x:.0f}, {entity.y:.0f})")


def run_app(
    controller: Optional[LayoutController] = None,
    source: Optional[RosterSource] = None,
) -> None:
    """Run the Pitchside TUI application."""
    app = PitchsideApp(controller=controller, source=source)
    app.run()
