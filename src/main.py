"""
Main entry point for generating word-search puzzles.

Usage:
    python -m src.main
    python -m src.main config.yaml
    python -m src.main config.yaml --output puzzles/round1.json --verbose
    python -m src.main --topic space --difficulty hard --size 12 --seed 7
"""

import argparse
import sys
from pathlib import Path

import yaml

from .game import PuzzleRound
from .generator import PuzzleConfig
from .verifiers import render_grid


def load_config(config_path: str) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return PuzzleConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a word-search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 10
  seed: 42
  topic: animals
  difficulty: easy
  max_attempts: 1000
  vowel_ratio: 0.3
  words:            # optional, overrides the topic pool
    - CAT
    - DOG
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument("--size", type=int, help="Grid dimension (overrides config)")
    parser.add_argument("--seed", type=int, help="Random seed (overrides config)")
    parser.add_argument("--topic", help="Word topic: animals, space, food or sports")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"])
    parser.add_argument(
        "--output", "-o",
        help="Path to save the puzzle JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print placement details and dropped words"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else PuzzleConfig()
        overrides = {
            "grid_size": args.size,
            "seed": args.seed,
            "topic": args.topic,
            "difficulty": args.difficulty,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if overrides:
            config = PuzzleConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        round_ = PuzzleRound.create(config)
    except ValueError as e:
        print(f"Error generating puzzle: {e}", file=sys.stderr)
        return 1

    puzzle = round_.puzzle

    if args.verbose:
        print(f"Grid: {puzzle.size}x{puzzle.size}, difficulty: {config.difficulty}")
        print()

    print(render_grid(puzzle.grid))
    print()
    print(f"Words to find ({len(puzzle.placed_words)}):")
    for pw in puzzle.placed_words:
        if args.verbose:
            print(f"  {pw.word:<14} {pw.direction:<14} from {tuple(pw.start)} to {tuple(pw.end)}")
        else:
            print(f"  {pw.word}")

    if args.verbose and puzzle.dropped_words:
        print()
        print(f"Dropped ({len(puzzle.dropped_words)}): {', '.join(puzzle.dropped_words)}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(puzzle.model_dump_json(indent=2))
        if args.verbose:
            print()
            print(f"Puzzle saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
