"""Data models for word-search grid generation."""

from collections import Counter
from typing import Dict, List, Optional, Literal, NamedTuple, Tuple
from pydantic import BaseModel, ConfigDict, Field


Direction = Literal['horizontal', 'vertical', 'diagonal-down', 'diagonal-up']
Difficulty = Literal['easy', 'medium', 'hard']

# Placement directions as (delta_row, delta_col)
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    'horizontal': (0, 1),
    'vertical': (1, 0),
    'diagonal-down': (1, 1),
    'diagonal-up': (-1, 1),
}


class Cell(NamedTuple):
    """A 0-indexed (row, col) position on the grid."""
    row: int
    col: int


class PlacedWord(BaseModel):
    """A word committed to the grid along with the cells it occupies."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=2, pattern=r'^[A-Z]+$')
    start: Cell
    direction: Direction
    cells: List[Cell]

    @property
    def end(self) -> Cell:
        """Cell holding the last letter."""
        return self.cells[-1]


class GameGrid(BaseModel):
    """
    A fully populated grid plus the words that were placed in it.

    Attributes:
        grid: Square matrix of single uppercase letters
        placed_words: Words that were committed, in placement order
        requested_words: Words the caller asked for, as supplied
    """
    model_config = ConfigDict(frozen=True)

    grid: List[List[str]]
    placed_words: List[PlacedWord] = Field(default_factory=list)
    requested_words: List[str] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def dropped_words(self) -> List[str]:
        """Requested words that did not make it into the grid."""
        remaining = Counter(pw.word for pw in self.placed_words)
        dropped = []
        for word in self.requested_words:
            key = word.strip().upper()
            if remaining[key] > 0:
                remaining[key] -= 1
            else:
                dropped.append(word)
        return dropped

    def letter_at(self, cell: Cell) -> str:
        return self.grid[cell[0]][cell[1]]


class PuzzleConfig(BaseModel):
    """Configuration for generating a puzzle round."""
    grid_size: int = Field(default=10, gt=0)
    max_attempts: int = Field(default=1000, gt=0)
    vowel_ratio: float = Field(default=0.3, ge=0.0, le=1.0)
    seed: Optional[int] = None
    topic: str = "animals"
    difficulty: Difficulty = "medium"
    words: Optional[List[str]] = None  # Overrides the topic word pool
