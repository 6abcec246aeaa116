"""Round bookkeeping, topics and scoring around the puzzle core."""

from .topics import Topic, TOPICS, TIME_LIMITS, WORDS_PER_GAME, get_topic, get_words, get_time_limit
from .scoring import calculate_score, POINTS_PER_LETTER
from .round import PuzzleRound, FoundWord, SubmissionResult

__all__ = [
    "Topic",
    "TOPICS",
    "TIME_LIMITS",
    "WORDS_PER_GAME",
    "get_topic",
    "get_words",
    "get_time_limit",
    "calculate_score",
    "POINTS_PER_LETTER",
    "PuzzleRound",
    "FoundWord",
    "SubmissionResult",
]
