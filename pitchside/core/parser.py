"""Roster parser: delimited sheet text -> ordered Player records.

Expected row layout (first non-blank line is a header and is skipped):

    name, number, grade, role

Fields are split on a bare comma. Quoting is not supported, so a comma inside
a name splits it into two columns and shifts everything after it. That
matches the published sheet format and is left as is on purpose: handling
quotes would change which column a value lands in.
"""

import re
from typing import Optional

from pitchside.core.models.entity import (
    DEFAULT_GRADE,
    DEFAULT_NAME,
    DEFAULT_NUMBER,
    DEFAULT_ROLE,
    Player,
)


DELIMITER = ","

# Column positions
COL_NAME = 0
COL_NUMBER = 1
COL_GRADE = 2
COL_ROLE = 3

_LEADING_INT = re.compile(r"^[+]?(\d+)")


def parse_grade(raw: str) -> Optional[int]:
    """
    Read a grade cell.

    Empty cells get the default grade. Leading digits are used ("2nd" -> 2).
    Cells with no leading digits come back as None (unclassified).
    """
    raw = raw.strip()
    if not raw:
        return DEFAULT_GRADE
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _column(cols: list[str], index: int) -> str:
    if index < len(cols):
        return cols[index].strip()
    return ""


def parse_row(line: str, index: int) -> Player:
    """Turn one data line into a Player. Short rows are filled with defaults."""
    cols = line.split(DELIMITER)
    return Player(
        id=index,
        name=_column(cols, COL_NAME) or DEFAULT_NAME,
        number=_column(cols, COL_NUMBER) or DEFAULT_NUMBER,
        grade=parse_grade(_column(cols, COL_GRADE)),
        role=_column(cols, COL_ROLE) or DEFAULT_ROLE,
    )


def parse_roster(text: str) -> list[Player]:
    """
    Parse raw roster text.

    Every non-blank line after the header yields exactly one Player, in input
    order, with ids 0..N-1. Coordinates are left at zero for the layout
    assigner to fill in. Never raises on malformed rows.

    Args:
        text: Raw newline-delimited sheet text

    Returns:
        Players in row order (empty when there is no data row)
    """
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]
    data_lines = lines[1:]
    return [parse_row(line, index) for index, line in enumerate(data_lines)]
