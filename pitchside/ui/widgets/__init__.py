"""TUI widgets."""

from pitchside.ui.widgets.board_view import BoardView
from pitchside.ui.widgets.scene_panel import ScenePanel

__all__ = ["BoardView", "ScenePanel"]
