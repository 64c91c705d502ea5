"""
Operational log records and cultivated entities.

Every record is a frozen dataclass and every history is a tuple: an edit
builds a new record with dataclasses.replace() instead of mutating one in
place. "Field" and "farm" are both modelled as Entity; the distinction is
only a label.

Records keep the units the dashboard collects:
- Water: US gallons
- Fertilizer: pounds
- Harvest: bushels
- Size: acres (free text, see parse_area)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from farmmetrics.core.parsing import FarmDataError, parse_amount, parse_area, parse_date, require_int

# Fertilizer type substrings that classify an application as organic
ORGANIC_KEYWORDS = ("organic", "manure", "compost")


def _require_amount(data: dict, key: str = "amount") -> float:
    amount = parse_amount(data.get(key))
    if amount is None:
        raise FarmDataError(f"Record has no numeric {key!r}: {data!r}")
    return amount


def _optional_float(value) -> float | None:
    return parse_amount(value)


# -----------------------------------------------------------------------------
# Operational Logs
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class WaterApplication:
    """One irrigation event."""

    amount: float  # gallons
    date: date | None

    @classmethod
    def from_dict(cls, data: dict) -> WaterApplication:
        return cls(amount=_require_amount(data), date=parse_date(data.get("date")))


@dataclass(frozen=True)
class FertilizerApplication:
    """One fertilizer application."""

    type: str
    amount: float  # lbs
    date: date | None

    @property
    def is_organic(self) -> bool:
        label = (self.type or "").lower()
        return any(keyword in label for keyword in ORGANIC_KEYWORDS)

    @classmethod
    def from_dict(cls, data: dict) -> FertilizerApplication:
        return cls(
            type=str(data.get("type") or ""),
            amount=_require_amount(data),
            date=parse_date(data.get("date")),
        )


@dataclass(frozen=True)
class HarvestRecord:
    """One harvest."""

    amount: float  # bushels
    date: date | None

    @classmethod
    def from_dict(cls, data: dict) -> HarvestRecord:
        return cls(amount=_require_amount(data), date=parse_date(data.get("date")))


@dataclass(frozen=True)
class CropRotationEntry:
    """A crop grown over a period. end_date >= start_date is not checked."""

    crop: str
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def from_dict(cls, data: dict) -> CropRotationEntry:
        return cls(
            crop=str(data.get("crop") or ""),
            start_date=parse_date(data.get("startDate") or data.get("start_date")),
            end_date=parse_date(data.get("endDate") or data.get("end_date")),
        )


# -----------------------------------------------------------------------------
# Cultivated Entity
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Entity:
    """A cultivated unit (field or farm) and its operational history."""

    id: int | str
    name: str = ""
    crop: str = ""
    size: float | str | None = None  # acres, as entered
    water_history: tuple[WaterApplication, ...] = ()
    fertilizer_history: tuple[FertilizerApplication, ...] = ()
    harvest_history: tuple[HarvestRecord, ...] = ()
    rotation_history: tuple[CropRotationEntry, ...] = ()
    organic_matter_percent: float | None = None
    soil_ph: float | None = None
    biodiversity_score: float | None = None

    @property
    def area_acres(self) -> float:
        """Parsed size; 0.0 when the size is missing or unusable."""
        return parse_area(self.size)

    @property
    def rotation_count(self) -> int:
        return len(self.rotation_history)

    @classmethod
    def from_dict(cls, data: dict) -> Entity:
        """Build from a stored farm/field record (camelCase or snake_case keys)."""
        if "id" not in data:
            raise FarmDataError(f"Entity record has no 'id': {data!r}")

        def _history(*keys: str) -> list[dict]:
            for key in keys:
                if data.get(key):
                    return data[key]
            return []

        return cls(
            id=data["id"],
            name=str(data.get("name") or ""),
            crop=str(data.get("crop") or ""),
            size=data.get("size"),
            water_history=tuple(
                WaterApplication.from_dict(r) for r in _history("waterHistory", "water_history")
            ),
            fertilizer_history=tuple(
                FertilizerApplication.from_dict(r) for r in _history("fertilizerHistory", "fertilizer_history")
            ),
            harvest_history=tuple(
                HarvestRecord.from_dict(r) for r in _history("harvestHistory", "harvest_history")
            ),
            rotation_history=tuple(
                CropRotationEntry.from_dict(r) for r in _history("rotationHistory", "rotation_history")
            ),
            organic_matter_percent=_optional_float(data.get("organicMatter", data.get("organic_matter_percent"))),
            soil_ph=_optional_float(data.get("soilPH", data.get("soil_ph"))),
            biodiversity_score=_optional_float(data.get("biodiversityScore", data.get("biodiversity_score"))),
        )


# -----------------------------------------------------------------------------
# Financial Records
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FinancialEntry:
    """One income or expense transaction."""

    date: date | None
    category: Literal["income", "expense"]
    type: str
    amount: float
    entity_id: int | str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> FinancialEntry:
        category = data.get("category")
        if category not in ("income", "expense"):
            raise FarmDataError(f"Financial entry category must be 'income' or 'expense': {data!r}")
        return cls(
            date=parse_date(data.get("date")),
            category=category,
            type=str(data.get("type") or ""),
            amount=_require_amount(data),
            entity_id=data.get("farmId", data.get("entity_id")),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class FinancialGoal:
    """A target financial outcome; progress is derived, never hand-set."""

    title: str
    target_amount: float
    deadline: date | None
    progress: float = 0.0
    id: int | str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> FinancialGoal:
        return cls(
            title=str(data.get("title") or ""),
            target_amount=_require_amount(data, "amount" if "amount" in data else "target_amount"),
            deadline=parse_date(data.get("deadline")),
            progress=_optional_float(data.get("progress")) or 0.0,
            id=data.get("id"),
        )


@dataclass(frozen=True)
class MonthlyProjection:
    """Planned income and expenses for one month (0-11)."""

    month: int
    income: float = 0.0
    expenses: float = 0.0

    @property
    def profit(self) -> float:
        return self.income - self.expenses


@dataclass(frozen=True)
class FinancialProjection:
    """A what-if scenario for a year."""

    scenario: str
    year: int
    description: str = ""
    monthly_data: tuple[MonthlyProjection, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> FinancialProjection:
        return cls(
            scenario=str(data.get("scenario") or ""),
            year=require_int(data.get("year") or 0, "year"),
            description=str(data.get("description") or ""),
            monthly_data=tuple(
                MonthlyProjection(
                    month=require_int(m.get("month", i), "month"),
                    income=_optional_float(m.get("income")) or 0.0,
                    expenses=_optional_float(m.get("expenses")) or 0.0,
                )
                for i, m in enumerate(data.get("monthlyData") or data.get("monthly_data") or [])
            ),
        )
