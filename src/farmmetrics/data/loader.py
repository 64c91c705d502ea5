"""Load a farm data export (JSON) into in-memory records."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from farmmetrics.core import get_data_file
from farmmetrics.core.parsing import parse_amount
from farmmetrics.data.records import (
    Entity,
    FarmDataError,
    FinancialEntry,
    FinancialGoal,
    FinancialProjection,
)
from farmmetrics.weather.conditions import WeatherObservation


@dataclass
class FarmData:
    """Everything the metrics engine consumes, already deserialized."""

    entities: list[Entity] = field(default_factory=list)
    weather: list[WeatherObservation] = field(default_factory=list)
    financial_entries: list[FinancialEntry] = field(default_factory=list)
    goals: list[FinancialGoal] = field(default_factory=list)
    budgets: dict[str, float] = field(default_factory=dict)
    projections: list[FinancialProjection] = field(default_factory=list)


def _list(data: dict, *keys: str) -> list:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, list):
            raise FarmDataError(f"Expected a list under {key!r}, got {type(value).__name__}")
        return value
    return []


def parse_budgets(raw: dict | None) -> dict[str, float]:
    """Budget category -> allocated amount; non-numeric allocations become 0."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise FarmDataError(f"Expected budgets to be an object, got {type(raw).__name__}")
    return {str(category): parse_amount(amount) or 0.0 for category, amount in raw.items()}


def parse_farm_data(data: dict) -> FarmData:
    """Build FarmData from a decoded JSON document.

    Accepts both the dashboard's storage keys ("farms", "weatherData",
    "financialData", "financialGoals", "financialBudgets") and the
    snake_case equivalents.
    """
    if not isinstance(data, dict):
        raise FarmDataError(f"Farm data root must be an object, got {type(data).__name__}")

    return FarmData(
        entities=[Entity.from_dict(e) for e in _list(data, "entities", "farms", "fields")],
        weather=[WeatherObservation.from_dict(w) for w in _list(data, "weather", "weatherData")],
        financial_entries=[
            FinancialEntry.from_dict(e) for e in _list(data, "financial_entries", "financialData")
        ],
        goals=[FinancialGoal.from_dict(g) for g in _list(data, "goals", "financialGoals")],
        budgets=parse_budgets(data.get("budgets", data.get("financialBudgets"))),
        projections=[
            FinancialProjection.from_dict(p) for p in _list(data, "projections", "financialProjections")
        ],
    )


def load_farm_data(path: Path | None = None) -> FarmData:
    """Load farm data from a JSON file (default: settings / cache dir)."""
    if path is None:
        path = get_data_file()

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise FarmDataError(f"{path} is not valid JSON: {e}") from e

    return parse_farm_data(data)
