"""
Standalone CLI for checking a selection against a saved puzzle.

Usage:
    python -m src.check puzzles/round1.json 0,0 0,1 0,2
    python -m src.check puzzles/round1.json 4,4 3,3 2,2 --show
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from .generator import Cell, GameGrid
from .verifiers import validate, render_grid


def parse_cell(text: str) -> Cell:
    """Parse a 'row,col' argument."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid cell '{text}' (expected row,col)")
    return Cell(row, col)


def load_puzzle(puzzle_path: Path) -> GameGrid:
    with open(puzzle_path) as f:
        return GameGrid.model_validate_json(f.read())


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check a cell selection against a saved word-search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit status is 0 when the selection finds a word, 1 when it does not,
and 2 on bad input.
        """
    )
    parser.add_argument("puzzle", help="Path to a puzzle JSON file from src.main")
    parser.add_argument("cells", nargs="+", type=parse_cell, help="Selected cells as row,col")
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the grid with the selection highlighted"
    )

    args = parser.parse_args(argv)

    puzzle_path = Path(args.puzzle)
    if not puzzle_path.exists():
        print(f"Error: Puzzle file not found: {args.puzzle}", file=sys.stderr)
        return 2

    try:
        puzzle = load_puzzle(puzzle_path)
    except (OSError, ValidationError) as e:
        print(f"Error loading puzzle: {e}", file=sys.stderr)
        return 2

    result = validate(args.cells, puzzle.grid, puzzle.placed_words)

    if args.show:
        print(render_grid(puzzle.grid, highlight=args.cells))
        print()

    if result.valid:
        print(f"Found: {result.word}")
        return 0

    print(f"Not a word ({result.reason})")
    return 1


if __name__ == "__main__":
    sys.exit(main())
