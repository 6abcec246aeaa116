"""Grid rendering utilities."""

from typing import Iterable, List, Sequence

from ..generator.models import Cell


def render_grid(grid: Sequence[Sequence[str]], highlight: Iterable[Cell] = ()) -> str:
    """
    Render the grid to a string, one row per line.

    Highlighted cells are shown in lowercase so a found word stands out.
    """
    marked = {tuple(cell) for cell in highlight}
    lines: List[str] = []
    for r, row in enumerate(grid):
        lines.append(' '.join(
            letter.lower() if (r, c) in marked else letter
            for c, letter in enumerate(row)
        ))
    return '\n'.join(lines)
