"""Data models for selection validation."""

from typing import Optional, Literal
from pydantic import BaseModel

from ..generator.models import PlacedWord


# Why a selection was rejected
RejectReason = Literal['TOO_SHORT', 'OUT_OF_BOUNDS', 'NOT_A_LINE', 'NO_MATCH']


class SelectionResult(BaseModel):
    """Result of validating a player's selection."""
    valid: bool
    word: Optional[str] = None
    placed_word: Optional[PlacedWord] = None  # The placement the selection traced
    reason: Optional[RejectReason] = None
