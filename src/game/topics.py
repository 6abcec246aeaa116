"""Topic word pools and per-difficulty round settings."""

from typing import Dict, List, Tuple

from pydantic import BaseModel

from ..generator.models import Difficulty


class Topic(BaseModel):
    """A themed pool of words, split by difficulty."""
    id: str
    name: str
    words: Dict[str, List[str]]


TOPICS: Dict[str, Topic] = {
    "animals": Topic(
        id="animals",
        name="Animals",
        words={
            "easy": ["CAT", "DOG", "BIRD", "FISH", "FROG", "BEAR", "LION", "DUCK"],
            "medium": ["TIGER", "ELEPHANT", "DOLPHIN", "PENGUIN", "RABBIT", "MONKEY", "GIRAFFE", "TURTLE"],
            "hard": ["BUTTERFLY", "CROCODILE", "FLAMINGO", "RHINOCEROS", "KANGAROO", "CHIMPANZEE", "HIPPOPOTAMUS", "OCTOPUS"],
        },
    ),
    "space": Topic(
        id="space",
        name="Space",
        words={
            "easy": ["STAR", "MOON", "SUN", "MARS", "EARTH", "SPACE", "COMET", "ORBIT"],
            "medium": ["PLANET", "GALAXY", "ROCKET", "SATURN", "JUPITER", "METEOR", "NEBULA", "COSMOS"],
            "hard": ["TELESCOPE", "ASTRONAUT", "CONSTELLATION", "SPACECRAFT", "ASTEROID", "BLACKHOLE", "SUPERNOVA", "ATMOSPHERE"],
        },
    ),
    "food": Topic(
        id="food",
        name="Food",
        words={
            "easy": ["PIZZA", "BREAD", "APPLE", "CAKE", "MILK", "RICE", "MEAT", "EGG"],
            "medium": ["BURGER", "PASTA", "CHEESE", "BANANA", "ORANGE", "CHICKEN", "SALMON", "COOKIE"],
            "hard": ["SPAGHETTI", "SANDWICH", "CHOCOLATE", "STRAWBERRY", "BLUEBERRY", "HAMBURGER", "PINEAPPLE", "WATERMELON"],
        },
    ),
    "sports": Topic(
        id="sports",
        name="Sports",
        words={
            "easy": ["BALL", "GOAL", "GAME", "TEAM", "WIN", "RUN", "JUMP", "PLAY"],
            "medium": ["SOCCER", "TENNIS", "HOCKEY", "BOXING", "GOLF", "RUGBY", "TRACK", "FIELD"],
            "hard": ["BASKETBALL", "FOOTBALL", "BASEBALL", "SWIMMING", "VOLLEYBALL", "BADMINTON", "WRESTLING", "MARATHON"],
        },
    ),
}

# Round length in seconds
TIME_LIMITS: Dict[str, int] = {
    "easy": 300,
    "medium": 900,
    "hard": 1500,
}

# Suggested number of words per round (inclusive)
WORDS_PER_GAME: Dict[str, Tuple[int, int]] = {
    "easy": (8, 12),
    "medium": (12, 16),
    "hard": (16, 20),
}


def _check_difficulty(difficulty: str) -> None:
    if difficulty not in TIME_LIMITS:
        raise ValueError(
            f"Unknown difficulty '{difficulty}' (expected one of {', '.join(TIME_LIMITS)})"
        )


def get_topic(topic_id: str) -> Topic:
    """
    Look up a topic by id.

    Raises:
        ValueError: If the topic does not exist
    """
    topic = TOPICS.get(topic_id.lower())
    if topic is None:
        raise ValueError(f"Unknown topic '{topic_id}' (expected one of {', '.join(TOPICS)})")
    return topic


def get_words(topic_id: str, difficulty: Difficulty = "medium") -> List[str]:
    """Word pool for a topic at the given difficulty (a fresh copy)."""
    _check_difficulty(difficulty)
    return list(get_topic(topic_id).words[difficulty])


def get_time_limit(difficulty: Difficulty) -> int:
    _check_difficulty(difficulty)
    return TIME_LIMITS[difficulty]
