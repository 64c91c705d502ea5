"""
Organic practice scoring from fertilizer and rotation history.

Starts from a base of 70 and adjusts:
- Organic share of applied fertilizer (by amount): up to +20
- Chemical fertilizer volume: -1 point per 100 lbs, capped at -30
- Crop rotation: +2 per rotation, capped at +10
- Consistency: +10 once at least 3 organic applications are logged

A fertilizer type counts as organic when it contains "organic", "manure"
or "compost" (case-insensitive).
"""

from farmmetrics.data.records import CropRotationEntry, FertilizerApplication
from farmmetrics.scoring.base import clamp_score

BASE_SCORE = 70.0
ORGANIC_SHARE_WEIGHT = 20.0

CHEMICAL_PENALTY_PER_1000_LBS = 10.0
CHEMICAL_PENALTY_CAP = 30.0

ROTATION_BONUS_EACH = 2.0
ROTATION_BONUS_CAP = 10.0

CONSISTENCY_MIN_APPLICATIONS = 3
CONSISTENCY_BONUS = 10.0


def organic_fraction(history: list[FertilizerApplication]) -> float | None:
    """Organic share of total applied amount; None with nothing applied."""
    total = sum(a.amount for a in history)
    if total == 0:
        return None
    organic = sum(a.amount for a in history if a.is_organic)
    return organic / total


def score_organic_practices(
    fertilizer_history: list[FertilizerApplication],
    rotation_history: list[CropRotationEntry] | None = None,
) -> float:
    """
    Score organic practices (0-100).

    Args:
        fertilizer_history: Fertilizer applications
        rotation_history: Crop rotations (optional)

    Returns:
        Score clamped to 0-100; 70 for an entity with no history at all
    """
    score = BASE_SCORE

    if fertilizer_history:
        fraction = organic_fraction(fertilizer_history)
        if fraction is not None:
            score += fraction * ORGANIC_SHARE_WEIGHT

        chemical = sum(a.amount for a in fertilizer_history if not a.is_organic)
        score -= min(CHEMICAL_PENALTY_CAP, chemical / 1000 * CHEMICAL_PENALTY_PER_1000_LBS)

    if rotation_history:
        score += min(ROTATION_BONUS_CAP, len(rotation_history) * ROTATION_BONUS_EACH)

    organic_count = sum(1 for a in fertilizer_history if a.is_organic)
    if organic_count >= CONSISTENCY_MIN_APPLICATIONS:
        score += CONSISTENCY_BONUS

    return clamp_score(score)
