"""Data modules - operational log records and the farm data loader."""

from farmmetrics.data.loader import FarmData, load_farm_data, parse_farm_data
from farmmetrics.data.records import (
    ORGANIC_KEYWORDS,
    CropRotationEntry,
    Entity,
    FarmDataError,
    FertilizerApplication,
    FinancialEntry,
    FinancialGoal,
    FinancialProjection,
    HarvestRecord,
    MonthlyProjection,
    WaterApplication,
)

__all__ = [
    "Entity",
    "WaterApplication",
    "FertilizerApplication",
    "HarvestRecord",
    "CropRotationEntry",
    "FinancialEntry",
    "FinancialGoal",
    "FinancialProjection",
    "MonthlyProjection",
    "FarmDataError",
    "ORGANIC_KEYWORDS",
    "FarmData",
    "load_farm_data",
    "parse_farm_data",
]
