"""Shared layout state and the drag state machine."""

from pitchside.state.drag import DragController, DragPhase
from pitchside.state.store import LayoutStore

__all__ = ["DragController", "DragPhase", "LayoutStore"]
