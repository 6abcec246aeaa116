"""Selection validation for word-search puzzles."""

from .selection import validate, read_path
from .models import SelectionResult, RejectReason
from .geometry import step_vector, is_valid_line, classify_selection, cells_match, in_bounds
from .grid import render_grid

__all__ = [
    # Main validation
    "validate",
    "read_path",
    # Models
    "SelectionResult",
    "RejectReason",
    # Geometry
    "step_vector",
    "is_valid_line",
    "classify_selection",
    "cells_match",
    "in_bounds",
    # Rendering
    "render_grid",
]
