"""Custom Textual messages for board interaction."""

from typing import Union

from textual.message import Message


class DragStartedMessage(Message):
    """Posted when a marker is picked up."""

    def __init__(self, entity_id: Union[int, str]) -> None:
        self.entity_id = entity_id
        super().__init__()


class DragEndedMessage(Message):
    """Posted when a marker is released (pointer up or left the board)."""

    def __init__(self, entity_id: Union[int, str]) -> None:
        self.entity_id = entity_id
        super().__init__()
