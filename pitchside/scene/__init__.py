"""3D scene: read-only projection of the layout store."""

from pitchside.scene.camera import PerspectiveCamera
from pitchside.scene.scene import (
    PropCollector,
    PropShape,
    RenderTarget,
    SceneProp,
    SceneView,
    pitch_outline,
)

__all__ = [
    "PerspectiveCamera",
    "PropCollector",
    "PropShape",
    "RenderTarget",
    "SceneProp",
    "SceneView",
    "pitch_outline",
]
