import random
from typing import List, Dict, Optional, Sequence
from pydantic import BaseModel, Field, ConfigDict

from ..generator.builder import GridBuilder
from ..generator.models import Cell, Difficulty, GameGrid, PlacedWord, PuzzleConfig
from ..verifiers.selection import validate
from .scoring import calculate_score
from .topics import get_time_limit, get_words


class FoundWord(BaseModel):
    """A placed word credited to a player."""
    word: str
    player_id: str
    placed_index: int
    score: int
    elapsed: float = 0.0


class SubmissionResult(BaseModel):
    """Outcome of a player's selection within a round."""
    player_id: str
    accepted: bool
    word: Optional[str] = None
    score: int = 0
    reason: Optional[str] = None


class PuzzleRound(BaseModel):
    """
    Tracks one round of play over a generated puzzle.

    The grid itself never changes. The round records which placed words have
    been found, by whom, and each player's score. A placed word is credited
    once; the same text placed twice can be found twice.

    Not thread-safe: callers serving several players concurrently must
    serialize calls to submit().

    Attributes:
        puzzle: The generated grid and placed words
        difficulty: Difficulty the round was created with
        time_limit: Round length in seconds
        found: Words found so far, in order
        scores: Total score per player id
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    puzzle: GameGrid
    difficulty: Difficulty = "medium"
    time_limit: int = Field(default=900, gt=0)
    found: List[FoundWord] = Field(default_factory=list)
    scores: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        config: Optional[PuzzleConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "PuzzleRound":
        """
        Factory method to create a round with a freshly built grid.

        Args:
            config: Puzzle configuration; explicit words override the topic pool
            rng: Optional random source for the grid builder

        Returns:
            A new PuzzleRound with no words found
        """
        if config is None:
            config = PuzzleConfig()

        words = config.words if config.words is not None else get_words(config.topic, config.difficulty)
        puzzle = GridBuilder.create(config, rng=rng).build(words)

        return cls(
            puzzle=puzzle,
            difficulty=config.difficulty,
            time_limit=get_time_limit(config.difficulty),
        )

    def _found_indices(self) -> set:
        return {fw.placed_index for fw in self.found}

    def _index_of(self, placed: PlacedWord) -> int:
        # Identity first; equal copies (e.g. after a JSON round-trip) fall back to value
        for i, candidate in enumerate(self.puzzle.placed_words):
            if candidate is placed:
                return i
        return self.puzzle.placed_words.index(placed)

    def submit(self, player_id: str, selection: Sequence[Cell], elapsed: float = 0.0) -> SubmissionResult:
        """
        Validate a selection and credit the player if it is a new find.

        Args:
            player_id: Player making the selection
            selection: Ordered cells the player dragged over
            elapsed: Seconds since the round started

        Returns:
            SubmissionResult; rejected selections carry a reason code
        """
        if elapsed > self.time_limit:
            return SubmissionResult(player_id=player_id, accepted=False, reason="TIME_UP")

        found = self._found_indices()
        remaining = [pw for i, pw in enumerate(self.puzzle.placed_words) if i not in found]

        result = validate(selection, self.puzzle.grid, remaining)
        if not result.valid:
            # Distinguish a repeat find from a miss
            if result.reason == "NO_MATCH" and validate(
                selection, self.puzzle.grid, self.puzzle.placed_words
            ).valid:
                return SubmissionResult(player_id=player_id, accepted=False, reason="ALREADY_FOUND")
            return SubmissionResult(player_id=player_id, accepted=False, reason=result.reason)

        score = calculate_score(result.word, time_bonus=self.time_limit - elapsed)
        self.found.append(FoundWord(
            word=result.word,
            player_id=player_id,
            placed_index=self._index_of(result.placed_word),
            score=score,
            elapsed=elapsed,
        ))
        self.scores[player_id] = self.scores.get(player_id, 0) + score

        return SubmissionResult(player_id=player_id, accepted=True, word=result.word, score=score)

    @property
    def remaining_words(self) -> List[str]:
        """Placed words nobody has found yet."""
        found = self._found_indices()
        return [pw.word for i, pw in enumerate(self.puzzle.placed_words) if i not in found]

    @property
    def is_complete(self) -> bool:
        return len(self._found_indices()) == len(self.puzzle.placed_words)

    def leader(self) -> Optional[str]:
        """Player with the highest score, or None before any find."""
        if not self.scores:
            return None
        return max(self.scores, key=self.scores.get)

    def get_state(self) -> Dict:
        """
        Get the current round state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "grid_size": self.puzzle.size,
            "difficulty": self.difficulty,
            "time_limit": self.time_limit,
            "words_placed": len(self.puzzle.placed_words),
            "words_found": len(self.found),
            "remaining_words": self.remaining_words,
            "scores": dict(self.scores),
            "is_complete": self.is_complete,
        }
