"""Derived metrics for farm operational logs.

This package turns water, fertilizer, harvest, rotation, weather and
financial logs into normalized scores and financial rollups.

Subpackages:
- farmmetrics.core: Configuration and unit conversion
- farmmetrics.data: Log records and the farm data loader
- farmmetrics.weather: Weather observations and day lookups
- farmmetrics.scoring: Sustainability scorers, aggregation and reports
- farmmetrics.finance: Financial summaries, budgets and goals
- farmmetrics.cli: Command-line reports
"""

# Re-export common items for convenience
from farmmetrics.core import settings
from farmmetrics.data import Entity, load_farm_data
from farmmetrics.finance import summarize_financials, update_goal_progress
from farmmetrics.scoring import (
    aggregate_sustainability,
    score_harvest_efficiency,
    score_organic_practices,
    score_rotation,
    score_soil_quality,
    score_water_efficiency,
)

__all__ = [
    "settings",
    "Entity",
    "load_farm_data",
    "score_water_efficiency",
    "score_organic_practices",
    "score_soil_quality",
    "score_harvest_efficiency",
    "score_rotation",
    "aggregate_sustainability",
    "summarize_financials",
    "update_goal_progress",
]

__version__ = "0.1.0"
