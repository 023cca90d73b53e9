"""Layout controller: source -> parser -> layout assigner -> store.

Owns the shared LayoutStore and the DragController that writes to it. A load
never leaves the store half-populated: the new roster is fully parsed and
placed before the single swap, and any failure ends in an empty store.
"""

import logging
from typing import Optional

from pitchside.core.config import BoardConfig, get_config
from pitchside.core.layout import LayoutAssigner
from pitchside.core.models.entity import Entity
from pitchside.core.parser import parse_roster
from pitchside.core.projector import Projector
from pitchside.events import EventBus, LoadStatus, LoadStatusEvent
from pitchside.sources import RosterSource, RosterSourceError
from pitchside.state.drag import DragController
from pitchside.state.store import LayoutStore

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    LoadStatus.IDLE: "No roster source",
    LoadStatus.LOADING: "Loading roster...",
    LoadStatus.LOADED: "Data loaded from sheet",
    LoadStatus.EMPTY: "Roster is empty",
    LoadStatus.FAILED: "Roster unavailable",
}


class LayoutController:
    """
    Top-level owner of the layout pipeline.

    Example:
        controller = LayoutController()
        await controller.load(SheetSource(url))
        controller.drag.pointer_down(0)
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config or get_config()
        self.event_bus = event_bus or EventBus()
        self.store = LayoutStore(self.event_bus)
        self.projector = Projector(depth_scale=self.config.depth_scale)
        self.assigner = LayoutAssigner(self.config)
        self.drag = DragController(self.store, self.projector)
        self.status = LoadStatus.IDLE

    def _set_status(self, status: LoadStatus, source: Optional[str] = None) -> None:
        self.status = status
        self.event_bus.emit(
            LoadStatusEvent(status=status, message=STATUS_MESSAGES[status], source=source)
        )

    @property
    def status_message(self) -> str:
        return STATUS_MESSAGES[self.status]

    def build_layout(self, text: str) -> list[Entity]:
        """Parse and place a roster without touching the store."""
        return self.assigner.assign(parse_roster(text))

    def load_text(self, text: str, source: Optional[str] = None) -> list[Entity]:
        """Replace the roster with one parsed from text."""
        entities = self.build_layout(text)
        self.drag.cancel()
        self.store.load(entities)
        player_count = len(entities) - 1
        self._set_status(LoadStatus.LOADED if player_count else LoadStatus.EMPTY, source)
        return entities

    async def load(self, source: RosterSource) -> bool:
        """
        Fetch, parse and swap in a roster.

        Failures are logged and leave an empty roster with FAILED status.

        Returns:
            True if the source was read (even if it had no players)
        """
        self._set_status(LoadStatus.LOADING, source.description)
        try:
            text = await source.fetch()
        except RosterSourceError as e:
            logger.warning("Roster load from %s failed: %s", source.description, e)
            self.drag.cancel()
            self.store.clear()
            self._set_status(LoadStatus.FAILED, source.description)
            return False

        self.load_text(text, source.description)
        return True
