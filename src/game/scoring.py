"""Score calculation for found words."""

POINTS_PER_LETTER = 10


def calculate_score(word: str, time_bonus: float = 0, difficulty_multiplier: float = 1) -> int:
    """
    Score a found word.

    Each letter is worth POINTS_PER_LETTER. A positive time bonus (seconds
    left on the clock) adds one point per ten seconds. The total is scaled by
    the difficulty multiplier and rounded down.
    """
    base_score = len(word) * POINTS_PER_LETTER
    bonus = int(time_bonus // 10) if time_bonus > 0 else 0
    return int((base_score + bonus) * difficulty_multiplier)
