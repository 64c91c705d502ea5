"""Sustainability scoring.

This module provides:
- Per-metric scorers (water.py, organic.py, soil.py, harvest.py, rotation.py)
- Weighted aggregation across entities (aggregate.py)
- Report figures and rating bands (report.py)
"""

from farmmetrics.scoring.aggregate import (
    METRIC_WEIGHTS,
    EntityScores,
    SustainabilityScore,
    aggregate_sustainability,
    average_metrics,
    combine_metric_scores,
    filter_by_crop,
    score_entity,
    weather_multiplier,
)
from farmmetrics.scoring.base import clamp_score, display_score
from farmmetrics.scoring.harvest import score_harvest_efficiency, yield_coefficient_of_variation
from farmmetrics.scoring.organic import organic_fraction, score_organic_practices
from farmmetrics.scoring.report import (
    Rating,
    SustainabilityReport,
    build_sustainability_report,
    cost_breakdown,
    rate_score,
)
from farmmetrics.scoring.rotation import score_rotation, unique_crops
from farmmetrics.scoring.soil import score_entity_soil, score_soil_quality
from farmmetrics.scoring.water import (
    application_efficiency,
    average_water_efficiency,
    latest_application,
    score_water_efficiency,
)

__all__ = [
    # water
    "application_efficiency",
    "average_water_efficiency",
    "latest_application",
    "score_water_efficiency",
    # organic
    "organic_fraction",
    "score_organic_practices",
    # soil
    "score_soil_quality",
    "score_entity_soil",
    # harvest
    "score_harvest_efficiency",
    "yield_coefficient_of_variation",
    # rotation
    "score_rotation",
    "unique_crops",
    # aggregate
    "METRIC_WEIGHTS",
    "EntityScores",
    "SustainabilityScore",
    "score_entity",
    "average_metrics",
    "combine_metric_scores",
    "weather_multiplier",
    "filter_by_crop",
    "aggregate_sustainability",
    # report
    "Rating",
    "SustainabilityReport",
    "build_sustainability_report",
    "cost_breakdown",
    "rate_score",
    # helpers
    "clamp_score",
    "display_score",
]
