"""
Harvest efficiency scoring.

Rewards consistent yields rather than large ones: the score starts at 100
and loses 20 points per unit of coefficient of variation (population
standard deviation / mean) across the harvest history.

Each harvest taken on a wet day costs a flat 5 points. This penalty is
additive, unlike the multiplicative weather factors used for irrigation.
"""

from farmmetrics.data.records import HarvestRecord
from farmmetrics.scoring.base import SCORE_MAX, clamp_score
from farmmetrics.weather.conditions import WeatherObservation, find_weather

CV_PENALTY_WEIGHT = 20.0
WET_HARVEST_PENALTY = 5.0


def yield_coefficient_of_variation(amounts: list[float]) -> float:
    """Population CV of yields; 0 for an empty list or a zero mean."""
    if not amounts:
        return 0.0
    mean = sum(amounts) / len(amounts)
    if mean == 0:
        return 0.0
    variance = sum((a - mean) ** 2 for a in amounts) / len(amounts)
    return variance**0.5 / mean


def score_harvest_efficiency(
    history: list[HarvestRecord],
    weather: list[WeatherObservation],
) -> float | None:
    """
    Score harvest consistency and weather exposure.

    Args:
        history: Harvest records
        weather: Weather series (any order)

    Returns:
        Score (0-100), or None when there is no harvest history
    """
    if not history:
        return None

    cv = yield_coefficient_of_variation([h.amount for h in history])
    score = SCORE_MAX - cv * CV_PENALTY_WEIGHT

    for harvest in history:
        observation = find_weather(weather, harvest.date)
        if observation is not None and observation.is_wet:
            score -= WET_HARVEST_PENALTY

    return clamp_score(score)
