"""Soil quality scoring from static soil attributes."""

from farmmetrics.data.records import Entity
from farmmetrics.scoring.base import clamp_score

BASE_SCORE = 70.0
ORGANIC_MATTER_POINTS_PER_PERCENT = 5.0

# Agronomic ideal pH midpoint
IDEAL_PH = 6.5
PH_PENALTY_PER_UNIT = 5.0

ROTATION_BONUS_EACH = 5.0
ROTATION_BONUS_CAP = 15.0


def score_soil_quality(
    organic_matter_percent: float | None = None,
    soil_ph: float | None = None,
    rotation_count: int = 0,
) -> float:
    """
    Score soil quality (0-100).

    Args:
        organic_matter_percent: Soil organic matter (%), if measured
        soil_ph: Soil pH, if measured
        rotation_count: Number of logged crop rotations

    Returns:
        Score clamped to 0-100
    """
    score = BASE_SCORE

    if organic_matter_percent is not None:
        score += organic_matter_percent * ORGANIC_MATTER_POINTS_PER_PERCENT

    if soil_ph is not None:
        score -= abs(soil_ph - IDEAL_PH) * PH_PENALTY_PER_UNIT

    score += min(ROTATION_BONUS_CAP, rotation_count * ROTATION_BONUS_EACH)

    return clamp_score(score)


def score_entity_soil(entity: Entity) -> float:
    """Soil quality for an entity's recorded attributes."""
    return score_soil_quality(
        organic_matter_percent=entity.organic_matter_percent,
        soil_ph=entity.soil_ph,
        rotation_count=entity.rotation_count,
    )
