"""Character-grid helpers shared by the board and scene widgets."""

from typing import Optional

from rich.text import Text


Cell = tuple[str, str]
Grid = list[list[Cell]]


def blank_grid(width: int, height: int, style: str) -> Grid:
    return [[(" ", style) for _ in range(max(0, width))] for _ in range(max(0, height))]


def background_of(style: str) -> Optional[str]:
    """The 'on <color>' part of a style string, if any."""
    if " on " in f" {style}":
        return f" {style}".split(" on ", 1)[1].split()[0]
    return None


def put(grid: Grid, col: int, row: int, char: str, style: str, keep_background: bool = False) -> None:
    """Set one cell; anything outside the grid is clipped."""
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        if keep_background:
            background = background_of(grid[row][col][1])
            if background:
                style = f"{style} on {background}"
        grid[row][col] = (char, style)


def put_text(grid: Grid, col: int, row: int, text: str, style: str, keep_background: bool = False) -> None:
    for offset, char in enumerate(text):
        put(grid, col + offset, row, char, style, keep_background)


def grid_to_text(grid: Grid) -> Text:
    """Join a cell grid into Rich Text, merging runs of equal style."""
    text = Text()
    for row_index, row in enumerate(grid):
        run_chars: list[str] = []
        run_style: Optional[str] = None
        for char, style in row:
            if style != run_style and run_chars:
                text.append("".join(run_chars), style=run_style)
                run_chars = []
            run_style = style
            run_chars.append(char)
        if run_chars:
            text.append("".join(run_chars), style=run_style)
        if row_index < len(grid) - 1:
            text.append("\n")
    return text
