"""
Selection validation for word-search puzzles.

A selection is a player's ordered cell path. It counts as a find only if:
1. It has at least two cells, all on the grid
2. The cells form a straight, evenly spaced line
3. The letters along it spell a placed word
4. The path is exactly that word's cell path, forwards or reversed

Rejections are ordinary results, never exceptions.
"""

from typing import List, Sequence

from ..generator.models import Cell, PlacedWord
from .geometry import cells_match, in_bounds, is_valid_line
from .models import SelectionResult


def read_path(grid: Sequence[Sequence[str]], cells: Sequence[Cell]) -> str:
    """Concatenate the letters along a path."""
    return ''.join(grid[row][col] for row, col in cells)


def validate(
    selection: Sequence[Cell],
    grid: Sequence[Sequence[str]],
    placed_words: Sequence[PlacedWord],
) -> SelectionResult:
    """
    Check whether a selection traces one of the placed words.

    The inputs are only read. When the same text was placed more than once,
    the first placement (in list order) whose path matches wins.

    Returns a SelectionResult with:
    - valid: True if the selection is an exact find
    - word: The uppercase word found
    - placed_word: The matched placement
    - reason: Why the selection was rejected, when it was
    """
    if len(selection) < 2:
        return SelectionResult(valid=False, reason="TOO_SHORT")

    cells: List[Cell] = [Cell(*cell) for cell in selection]

    # Negative indices would otherwise wrap around the grid
    if not all(in_bounds(cell, len(grid)) and cell.col < len(grid[cell.row]) for cell in cells):
        return SelectionResult(valid=False, reason="OUT_OF_BOUNDS")

    if not is_valid_line(cells):
        return SelectionResult(valid=False, reason="NOT_A_LINE")

    candidate = read_path(grid, cells).upper()

    for placed in placed_words:
        # A reversed drag reads the word backwards
        forward = candidate == placed.word and cells_match(cells, placed.cells)
        backward = candidate[::-1] == placed.word and cells_match(cells, placed.cells[::-1])
        if forward or backward:
            return SelectionResult(valid=True, word=placed.word, placed_word=placed)

    return SelectionResult(valid=False, reason="NO_MATCH")
