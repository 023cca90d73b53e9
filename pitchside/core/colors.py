"""Marker colour classification."""

from typing import Optional

from pitchside.core.config import ColorScheme, get_config
from pitchside.core.models.entity import Ball, Entity, Player


def grade_color(grade: Optional[int], scheme: ColorScheme) -> str:
    """Colour for a grade; unknown or unclassified grades get the default."""
    if grade is None:
        return scheme.default
    return scheme.grades.get(grade, scheme.default)


def entity_color(entity: Entity, scheme: Optional[ColorScheme] = None) -> str:
    """Colour for any board entity."""
    scheme = scheme or get_config().colors
    if isinstance(entity, Ball):
        return scheme.ball
    if isinstance(entity, Player):
        return grade_color(entity.grade, scheme)
    raise TypeError(f"Not a board entity: {entity!r}")
