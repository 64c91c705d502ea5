"""
Sustainability aggregation across entities.

Each entity gets five sub-scores; each sub-score is averaged over the
entities that have data for it, and the averages are combined with fixed
weights:

    water_efficiency     0.25
    organic_score        0.20
    harvest_efficiency   0.20
    soil_quality         0.20
    rotation             0.15

Metrics without data are left out of both the weighted sum and the weight
total, so missing data redistributes weight instead of dragging the score
down. The combined score is then nudged by today's weather:

- Wet day: x0.95
- High above 35°C or below 5°C: x0.95 (stacks)
"""

from dataclasses import dataclass, field
from datetime import date

from farmmetrics.data.records import Entity
from farmmetrics.scoring.base import clamp_score, display_score
from farmmetrics.scoring.harvest import score_harvest_efficiency
from farmmetrics.scoring.organic import score_organic_practices
from farmmetrics.scoring.rotation import score_rotation
from farmmetrics.scoring.soil import score_entity_soil
from farmmetrics.scoring.water import average_water_efficiency
from farmmetrics.weather.conditions import WeatherObservation, current_weather

METRIC_WEIGHTS: dict[str, float] = {
    "water_efficiency": 0.25,
    "organic_score": 0.20,
    "harvest_efficiency": 0.20,
    "soil_quality": 0.20,
    "rotation": 0.15,
}

WEATHER_ADJUSTMENT = 0.95
EXTREME_HEAT_C = 35.0
EXTREME_COLD_C = 5.0


@dataclass(frozen=True)
class EntityScores:
    """The five sub-scores of one entity; None marks a metric without data."""

    entity_id: int | str
    water_efficiency: float | None
    organic_score: float | None
    harvest_efficiency: float | None
    soil_quality: float | None
    rotation: float | None

    def as_dict(self) -> dict[str, float | None]:
        return {metric: getattr(self, metric) for metric in METRIC_WEIGHTS}


@dataclass(frozen=True)
class SustainabilityScore:
    """Overall sustainability for a set of entities."""

    overall: float  # unrounded
    metrics: dict[str, float | None] = field(default_factory=dict)
    entity_count: int = 0

    @property
    def display(self) -> int:
        return display_score(self.overall)


def score_entity(entity: Entity, weather: list[WeatherObservation]) -> EntityScores:
    """Compute all five sub-scores for one entity."""
    return EntityScores(
        entity_id=entity.id,
        water_efficiency=average_water_efficiency(entity, weather),
        organic_score=score_organic_practices(
            list(entity.fertilizer_history),
            list(entity.rotation_history),
        ),
        harvest_efficiency=score_harvest_efficiency(list(entity.harvest_history), weather),
        soil_quality=score_entity_soil(entity),
        rotation=score_rotation(list(entity.rotation_history)),
    )


def average_metrics(scores: list[EntityScores]) -> dict[str, float | None]:
    """Average each metric over the entities that have data for it."""
    averages: dict[str, float | None] = {}
    for metric in METRIC_WEIGHTS:
        values = [v for s in scores if (v := getattr(s, metric)) is not None]
        averages[metric] = sum(values) / len(values) if values else None
    return averages


def weather_multiplier(current: WeatherObservation | None) -> float:
    """Adjustment for today's weather (1.0 when today is unknown).

    A day without a recorded high gets no temperature adjustment.
    """
    if current is None:
        return 1.0
    multiplier = 1.0
    if current.is_wet:
        multiplier *= WEATHER_ADJUSTMENT
    high_c = current.high_temp_c
    if high_c is not None and (high_c > EXTREME_HEAT_C or high_c < EXTREME_COLD_C):
        multiplier *= WEATHER_ADJUSTMENT
    return multiplier


def combine_metric_scores(
    averages: dict[str, float | None],
    current: WeatherObservation | None = None,
) -> float | None:
    """
    Weighted overall score from per-metric averages.

    Args:
        averages: Metric name -> average score, None for metrics without data
        current: Today's weather, if known

    Returns:
        Overall score (unrounded, 0-100), or None when no metric has data
    """
    weighted_sum = 0.0
    weight_used = 0.0
    for metric, weight in METRIC_WEIGHTS.items():
        value = averages.get(metric)
        if value is None:
            continue
        weighted_sum += value * weight
        weight_used += weight

    if weight_used == 0:
        return None

    # Redistribute the weight of missing metrics
    if weight_used < 1:
        weighted_sum /= weight_used

    return clamp_score(weighted_sum * weather_multiplier(current))


def filter_by_crop(entities: list[Entity], crop: str | None) -> list[Entity]:
    """Entities growing `crop` (case-insensitive); all of them when crop is None/"all"."""
    if crop is None or crop.strip().lower() in ("", "all"):
        return list(entities)
    wanted = crop.strip().lower()
    return [e for e in entities if e.crop.strip().lower() == wanted]


def aggregate_sustainability(
    entities: list[Entity],
    weather: list[WeatherObservation],
    crop: str | None = None,
    as_of: date | None = None,
) -> SustainabilityScore | None:
    """
    Aggregate sustainability for a set of entities.

    Args:
        entities: Entities to score
        weather: Weather series (today first unless `as_of` is given)
        crop: Only score entities growing this crop
        as_of: Day whose weather adjusts the overall score

    Returns:
        SustainabilityScore, or None ("unavailable") when there are no
        entities to score or no weather
    """
    selected = filter_by_crop(entities, crop)
    if not selected or not weather:
        return None

    scores = [score_entity(e, weather) for e in selected]
    averages = average_metrics(scores)
    overall = combine_metric_scores(averages, current_weather(weather, as_of))
    if overall is None:
        return None

    return SustainabilityScore(overall=overall, metrics=averages, entity_count=len(selected))
