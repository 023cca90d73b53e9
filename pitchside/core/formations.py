"""Starter formation tables.

Each table lists (x, y) board coordinates for the starting players in roster
order: keeper first, then defence, midfield and attack. Left to right is
x (own goal at 0), top to bottom is y. A slot may be None, in which case the
layout assigner uses the centre spot instead.
"""

from typing import Optional


Slot = Optional[tuple[float, float]]
FormationTable = tuple[Slot, ...]

DEFAULT_FORMATION = "4-3-3"

FORMATIONS: dict[str, FormationTable] = {
    "4-3-3": (
        (10, 50),  # GK
        (30, 20), (30, 80), (30, 35), (30, 65),  # DF
        (50, 50), (50, 30), (50, 70),  # MF
        (70, 40), (70, 60), (80, 50),  # FW
    ),
    "4-4-2": (
        (10, 50),
        (30, 20), (30, 80), (30, 40), (30, 60),
        (52, 15), (50, 40), (50, 60), (52, 85),
        (75, 40), (75, 60),
    ),
    "3-5-2": (
        (10, 50),
        (30, 30), (28, 50), (30, 70),
        (50, 10), (48, 35), (45, 50), (48, 65), (50, 90),
        (75, 40), (75, 60),
    ),
}


def get_formation(name: str) -> FormationTable:
    """
    Look up a formation table by name.

    Raises:
        KeyError: If no formation with that name is registered
    """
    try:
        return FORMATIONS[name]
    except KeyError:
        available = ", ".join(sorted(FORMATIONS))
        raise KeyError(f"Unknown formation {name!r} (available: {available})") from None


def list_formations() -> list[str]:
    return sorted(FORMATIONS)
