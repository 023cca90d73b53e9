"""3D scene panel: the layout seen through a perspective camera."""

from typing import Optional

from rich.text import Text
from textual.widget import Widget

from pitchside.scene.camera import PerspectiveCamera
from pitchside.scene.scene import SceneView
from pitchside.service import LayoutController
from pitchside.ui.scene_target import TextRenderTarget


class ScenePanel(Widget):
    """Read-only view; every store change rebuilds the props from the store."""

    DEFAULT_CSS = """
    ScenePanel {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(
        self,
        controller: LayoutController,
        camera: Optional[PerspectiveCamera] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.target = TextRenderTarget(camera, on_change=self.refresh)
        self.scene = SceneView(
            controller.store,
            self.target,
            projector=controller.projector,
            colors=controller.config.colors,
        )

    def on_mount(self) -> None:
        self.scene.attach()

    def on_unmount(self) -> None:
        self.scene.detach()

    def render(self) -> Text:
        size = self.content_size
        return self.target.render(size.width, size.height)
