"""Line geometry for cell selections."""

from typing import Literal, Sequence, Tuple

from ..generator.models import Cell


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def step_vector(first: Cell, second: Cell) -> Tuple[int, int]:
    """Unit step from `first` towards `second`, each axis normalized to -1, 0 or +1."""
    return _sign(second[0] - first[0]), _sign(second[1] - first[1])


def in_bounds(cell: Cell, size: int) -> bool:
    return 0 <= cell[0] < size and 0 <= cell[1] < size


def is_valid_line(cells: Sequence[Cell]) -> bool:
    """
    Check that cells form a straight, evenly spaced line.

    The step is taken from the first two cells. Every cell must sit exactly
    `i` steps from the first one, so gaps, bends and repeated cells fail.
    """
    if len(cells) < 2:
        return False

    first = cells[0]
    d_row, d_col = step_vector(first, cells[1])
    if d_row == 0 and d_col == 0:
        return False

    for i, cell in enumerate(cells):
        if cell[0] != first[0] + i * d_row or cell[1] != first[1] + i * d_col:
            return False
    return True


def classify_selection(
    cells: Sequence[Cell]
) -> Literal['horizontal', 'vertical', 'diagonal', 'invalid']:
    """Coarse orientation of a selection from its first and last cells."""
    if len(cells) < 2:
        return 'invalid'

    row_diff = abs(cells[-1][0] - cells[0][0])
    col_diff = abs(cells[-1][1] - cells[0][1])

    if row_diff == 0 and col_diff == 0:
        return 'invalid'
    if row_diff == 0:
        return 'horizontal'
    if col_diff == 0:
        return 'vertical'
    if row_diff == col_diff:
        return 'diagonal'
    return 'invalid'


def cells_match(a: Sequence[Cell], b: Sequence[Cell]) -> bool:
    """Same cells in the same order."""
    if len(a) != len(b):
        return False
    return all(tuple(x) == tuple(y) for x, y in zip(a, b))
