import random
import re
from typing import List, Optional, Sequence
from pydantic import BaseModel, Field, ConfigDict

from .letters import random_filler, DEFAULT_VOWEL_RATIO
from .models import Cell, Direction, DIRECTION_VECTORS, PlacedWord, GameGrid, PuzzleConfig


DEFAULT_GRID_SIZE = 10
MAX_ATTEMPTS = 1000  # Random (direction, start) tries per word

_WORD_PATTERN = re.compile(r'^[A-Z]+$')


class Placement(BaseModel):
    """A candidate location for a word that passed the fit check."""
    start: Cell
    direction: Direction
    cells: List[Cell]


class GridBuilder(BaseModel):
    """
    Builds a square word-search grid.

    Words are placed longest-first along one of four directions by randomized
    search with a fixed retry budget. Words may cross where their letters
    agree. Any word that cannot be placed within the budget is dropped.
    Remaining cells are filled with vowel-biased random letters.

    Attributes:
        size: Width and height of the grid
        max_attempts: Placement attempts per word before it is dropped
        vowel_ratio: Probability that a filler letter is a vowel
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    size: int = Field(default=DEFAULT_GRID_SIZE, gt=0)
    max_attempts: int = Field(default=MAX_ATTEMPTS, gt=0)
    vowel_ratio: float = Field(default=DEFAULT_VOWEL_RATIO, ge=0.0, le=1.0)
    seed: Optional[int] = None
    _rng: random.Random = None
    _grid: List[List[str]] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and an empty grid."""
        self._rng = random.Random(self.seed)
        self.reset()

    @classmethod
    def create(cls, config: PuzzleConfig, rng: Optional[random.Random] = None) -> "GridBuilder":
        """
        Factory method to create a builder from a puzzle configuration.

        Args:
            config: Puzzle configuration (grid size, retry budget, filler bias, seed)
            rng: Optional random source that replaces the seeded one

        Returns:
            A GridBuilder with an empty grid
        """
        builder = cls(
            size=config.grid_size,
            max_attempts=config.max_attempts,
            vowel_ratio=config.vowel_ratio,
            seed=config.seed,
        )
        if rng is not None:
            builder._rng = rng
        return builder

    def reset(self) -> None:
        self._grid = [['' for _ in range(self.size)] for _ in range(self.size)]

    def path(self, start: Cell, direction: Direction, length: int) -> List[Cell]:
        """Cells visited by stepping `length` times from `start`."""
        d_row, d_col = DIRECTION_VECTORS[direction]
        return [Cell(start.row + i * d_row, start.col + i * d_col) for i in range(length)]

    def fits(self, word: str, cells: List[Cell]) -> bool:
        """Check every cell is on the grid and empty or already holding the needed letter."""
        for letter, (row, col) in zip(word, cells):
            if not (0 <= row < self.size and 0 <= col < self.size):
                return False
            existing = self._grid[row][col]
            if existing != '' and existing != letter:
                return False
        return True

    def find_placement(self, word: str) -> Optional[Placement]:
        """Search for a valid placement, giving up after `max_attempts` tries."""
        directions = list(DIRECTION_VECTORS)
        for _ in range(self.max_attempts):
            direction = self._rng.choice(directions)
            start = Cell(self._rng.randrange(self.size), self._rng.randrange(self.size))
            cells = self.path(start, direction, len(word))
            if self.fits(word, cells):
                return Placement(start=start, direction=direction, cells=cells)
        return None

    def place(self, word: str, placement: Placement) -> PlacedWord:
        """Write the word into the grid and record it."""
        for letter, (row, col) in zip(word, placement.cells):
            self._grid[row][col] = letter
        return PlacedWord(
            word=word,
            start=placement.start,
            direction=placement.direction,
            cells=placement.cells,
        )

    def fill_empty_cells(self) -> None:
        for row in self._grid:
            for col, letter in enumerate(row):
                if letter == '':
                    row[col] = random_filler(self._rng, self.vowel_ratio)

    def build(self, words: Sequence[str]) -> GameGrid:
        """
        Place the words and fill the rest of the grid.

        Words are normalized to uppercase. Words shorter than two letters,
        longer than the grid, or containing non-letters are skipped. The
        returned GameGrid lists only the words actually committed.
        """
        self.reset()
        placed_words: List[PlacedWord] = []

        # Longest first; sorted() is stable so ties keep their input order
        candidates = sorted((w.strip().upper() for w in words), key=len, reverse=True)

        for word in candidates:
            if not 2 <= len(word) <= self.size or not _WORD_PATTERN.match(word):
                continue
            placement = self.find_placement(word)
            if placement is not None:
                placed_words.append(self.place(word, placement))

        self.fill_empty_cells()

        grid = self._grid
        self.reset()
        return GameGrid(grid=grid, placed_words=placed_words, requested_words=list(words))


def build_grid(
    words: Sequence[str],
    size: int = DEFAULT_GRID_SIZE,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
    vowel_ratio: float = DEFAULT_VOWEL_RATIO,
) -> GameGrid:
    """
    Generate a word-search grid.

    Args:
        words: Words to place; duplicates and an empty list are allowed
        size: Grid dimension (N x N)
        seed: Optional random seed for a reproducible grid
        rng: Optional random source, takes precedence over `seed`
        max_attempts: Retry budget per word
        vowel_ratio: Probability that a filler letter is a vowel

    Returns:
        GameGrid with a fully filled grid and the placed words

    Raises:
        ValueError: If size is less than 1
    """
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")

    builder = GridBuilder(size=size, max_attempts=max_attempts, vowel_ratio=vowel_ratio, seed=seed)
    if rng is not None:
        builder._rng = rng
    return builder.build(words)
