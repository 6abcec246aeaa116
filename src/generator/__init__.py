"""Word-search grid generation."""

from .models import Cell, Direction, Difficulty, DIRECTION_VECTORS, PlacedWord, GameGrid, PuzzleConfig
from .letters import VOWELS, CONSONANTS, random_filler
from .builder import GridBuilder, Placement, build_grid, MAX_ATTEMPTS, DEFAULT_GRID_SIZE

__all__ = [
    # Models
    "Cell",
    "Direction",
    "Difficulty",
    "DIRECTION_VECTORS",
    "PlacedWord",
    "GameGrid",
    "PuzzleConfig",
    # Letter source
    "VOWELS",
    "CONSONANTS",
    "random_filler",
    # Builder
    "GridBuilder",
    "Placement",
    "build_grid",
    "MAX_ATTEMPTS",
    "DEFAULT_GRID_SIZE",
]
