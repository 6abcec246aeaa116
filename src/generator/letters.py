"""Filler letter source for empty grid cells."""

import random

VOWELS = "AEIOU"
CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"

DEFAULT_VOWEL_RATIO = 0.3


def random_filler(rng: random.Random, vowel_ratio: float = DEFAULT_VOWEL_RATIO) -> str:
    """
    Draw one filler letter.

    A vowel is chosen with probability `vowel_ratio`, otherwise a consonant,
    each uniformly from its set. The bias keeps the grid looking natural.
    """
    letters = VOWELS if rng.random() < vowel_ratio else CONSONANTS
    return rng.choice(letters)
