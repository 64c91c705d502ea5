"""Crop rotation scoring: how often crops rotate and how many differ."""

from farmmetrics.data.records import CropRotationEntry
from farmmetrics.scoring.base import SCORE_MAX, clamp_score

POINTS_PER_ROTATION = 20.0
DIVERSITY_POINTS_PER_CROP = 5.0
DIVERSITY_BONUS_CAP = 20.0


def unique_crops(history: list[CropRotationEntry]) -> set[str]:
    """Distinct crop names, compared case-insensitively."""
    return {entry.crop.strip().lower() for entry in history if entry.crop.strip()}


def score_rotation(history: list[CropRotationEntry]) -> float | None:
    """
    Score crop rotation (0-100).

    Returns:
        min(100, 20 * rotations) plus up to 20 diversity points, capped
        at 100; None when no rotation is logged
    """
    if not history:
        return None

    frequency = min(SCORE_MAX, len(history) * POINTS_PER_ROTATION)
    diversity = min(DIVERSITY_BONUS_CAP, len(unique_crops(history)) * DIVERSITY_POINTS_PER_CROP)
    return clamp_score(frequency + diversity)
