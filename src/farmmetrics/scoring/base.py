"""Shared score bounds and helpers for the sustainability scorers.

Scorers whose score comes from a history return ``float | None``: None means
there is no data (an empty history), which is not the same thing as a score
of 0.
"""

import math

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp_score(value: float) -> float:
    """Clamp a raw score into [0, 100]; NaN collapses to 0."""
    if math.isnan(value):
        return SCORE_MIN
    return max(SCORE_MIN, min(SCORE_MAX, value))


def display_score(value: float) -> int:
    """Round a score half-up for display (42.5 -> 43)."""
    return math.floor(value + 0.5)
