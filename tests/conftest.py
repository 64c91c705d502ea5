"""Shared test fixtures."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src/ to path so tests can import farmmetrics
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from farmmetrics.data.records import (  # noqa: E402
    CropRotationEntry,
    Entity,
    FertilizerApplication,
    FinancialEntry,
    HarvestRecord,
    WaterApplication,
)
from farmmetrics.weather.conditions import WeatherCondition, WeatherObservation  # noqa: E402

# 68°F = 20°C, a mild day that triggers no temperature penalty
MILD_F = 68.0


def obs(d: date, label: str = "Clear", temp_f: float | None = MILD_F) -> WeatherObservation:
    """Build a weather observation classified from its label."""
    return WeatherObservation(
        date=d,
        high_temp_f=temp_f,
        condition_label=label,
        condition=WeatherCondition.from_label(label),
    )


@pytest.fixture
def weather_series():
    """A week of weather with a wet spell mid-week (feed order: today first)."""
    return [
        obs(date(2024, 6, 7), "Sunny"),
        obs(date(2024, 6, 1), "Clear"),
        obs(date(2024, 6, 2), "Light rain"),
        obs(date(2024, 6, 3), "Heavy Rain"),
        obs(date(2024, 6, 4), "Partly cloudy", temp_f=95.0),
        obs(date(2024, 6, 5), "Clear", temp_f=40.0),
        obs(date(2024, 6, 6), "Overcast"),
    ]


@pytest.fixture
def north_field():
    """A field with every kind of history."""
    return Entity(
        id=1,
        name="North Field",
        crop="Corn",
        size="40",
        water_history=(
            WaterApplication(amount=2000, date=date(2024, 6, 1)),
            WaterApplication(amount=1500, date=date(2024, 6, 6)),
        ),
        fertilizer_history=(
            FertilizerApplication(type="Compost", amount=300, date=date(2024, 5, 1)),
            FertilizerApplication(type="NPK 10-10-10", amount=200, date=date(2024, 5, 15)),
        ),
        harvest_history=(
            HarvestRecord(amount=180, date=date(2024, 6, 2)),
            HarvestRecord(amount=200, date=date(2024, 6, 5)),
        ),
        rotation_history=(
            CropRotationEntry(crop="Corn", start_date=date(2022, 4, 1), end_date=date(2022, 10, 1)),
            CropRotationEntry(crop="Soybeans", start_date=date(2023, 4, 1), end_date=date(2023, 10, 1)),
        ),
        organic_matter_percent=3.0,
        soil_ph=6.8,
    )


@pytest.fixture
def bare_field():
    """A field with no logged history and no soil attributes."""
    return Entity(id=2, name="South Pasture", crop="Wheat", size="abc")


@pytest.fixture
def financial_entries():
    """A mixed year of transactions across two entities plus one prior-year entry."""
    return [
        FinancialEntry(date=date(2024, 1, 15), category="income", type="Crop Sales", amount=5000.0, entity_id=1),
        FinancialEntry(date=date(2024, 1, 20), category="expense", type="Seeds", amount=1200.0, entity_id=1),
        FinancialEntry(date=date(2024, 3, 3), category="expense", type="Fertilizer", amount=800.0, entity_id=2),
        FinancialEntry(date=date(2024, 7, 9), category="income", type="Crop Sales", amount=7000.0, entity_id=2),
        FinancialEntry(date=date(2024, 7, 30), category="income", type="Subsidy", amount=1000.0, entity_id=1),
        FinancialEntry(date=date(2024, 12, 31), category="expense", type="Labor", amount=2000.0, entity_id=1),
        FinancialEntry(date=date(2023, 6, 1), category="income", type="Crop Sales", amount=9999.0, entity_id=1),
    ]


@pytest.fixture
def make_obs():
    """Factory for weather observations: make_obs(date, label="Clear", temp_f=68.0)."""
    return obs
