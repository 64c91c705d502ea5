"""
Sustainability report figures.

Builds on the aggregate score with the headline numbers a report shows:
water saved against an industry baseline, chemical reduction, organic
practice adoption, recommendations for weak metrics, and a rating band.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from farmmetrics.data.records import Entity, FinancialEntry
from farmmetrics.scoring.aggregate import (
    SustainabilityScore,
    aggregate_sustainability,
    filter_by_crop,
)
from farmmetrics.weather.conditions import WeatherObservation

# Industry baseline water use (gallons per acre)
INDUSTRY_GALLONS_PER_ACRE = 100.0

# Organic ratio assumed when no fertilizer has been logged
DEFAULT_ORGANIC_RATIO = 0.5

RECOMMENDATION_THRESHOLD = 80.0

RECOMMENDATIONS: dict[str, str] = {
    "water_efficiency": "Implement drip irrigation to improve water usage efficiency",
    "organic_score": "Increase use of organic fertilizers to reduce chemical dependency",
    "harvest_efficiency": "Review crop density and soil health management",
    "soil_quality": "Consider cover crops during off-seasons to improve soil structure",
    "rotation": "Implement more diverse crop rotation practices to improve soil health",
}

COST_CATEGORIES = ("Seeds", "Fertilizer", "Labor", "Equipment", "Fuel", "Other")


class Rating(Enum):
    """Score bands used to color and describe a score."""

    EXCELLENT = "excellent"  # 80+
    GOOD = "good"  # 60-79
    MODERATE = "moderate"  # 40-59
    POOR = "poor"  # below 40

    @property
    def description(self) -> str:
        return RATING_DESCRIPTIONS[self]


RATING_DESCRIPTIONS = {
    Rating.EXCELLENT: "Excellent sustainability practices",
    Rating.GOOD: "Good sustainability practices with room for improvement",
    Rating.MODERATE: "Moderate sustainability practices - significant improvements needed",
    Rating.POOR: "Poor sustainability practices - immediate action recommended",
}


def rate_score(score: float) -> Rating:
    """Band a 0-100 score."""
    if score >= 80:
        return Rating.EXCELLENT
    elif score >= 60:
        return Rating.GOOD
    elif score >= 40:
        return Rating.MODERATE
    else:
        return Rating.POOR


@dataclass(frozen=True)
class SustainabilityReport:
    """Report figures for a set of entities."""

    score: SustainabilityScore
    water_savings: float  # gallons
    chemical_reduction: int  # %
    organic_practices_adoption: int  # %
    recommendations: list[str] = field(default_factory=list)

    @property
    def rating(self) -> Rating:
        return rate_score(self.score.overall)


def water_savings(entities: list[Entity]) -> float:
    """Gallons saved against the industry baseline (never negative)."""
    baseline = sum(e.area_acres * INDUSTRY_GALLONS_PER_ACRE for e in entities)
    used = sum(a.amount for e in entities for a in e.water_history)
    return max(0.0, baseline - used)


def organic_application_ratio(entities: list[Entity]) -> float:
    """Share of fertilizer applications (by count) that are organic."""
    applications = [a for e in entities for a in e.fertilizer_history]
    if not applications:
        return DEFAULT_ORGANIC_RATIO
    return sum(1 for a in applications if a.is_organic) / len(applications)


def organic_practices_adoption(entities: list[Entity]) -> int:
    """Mean soil organic matter (%) across entities, missing counted as 0."""
    if not entities:
        return 0
    total = sum(e.organic_matter_percent or 0.0 for e in entities)
    return min(100, round(total / len(entities)))


def recommend(metrics: dict[str, float | None]) -> list[str]:
    """One recommendation per scored metric below the threshold."""
    return [
        RECOMMENDATIONS[metric]
        for metric, value in metrics.items()
        if value is not None and value < RECOMMENDATION_THRESHOLD and metric in RECOMMENDATIONS
    ]


def build_sustainability_report(
    entities: list[Entity],
    weather: list[WeatherObservation],
    crop: str | None = None,
    as_of: date | None = None,
) -> SustainabilityReport | None:
    """
    Build the sustainability report for the selected entities.

    Returns:
        SustainabilityReport, or None when the aggregate is unavailable
    """
    score = aggregate_sustainability(entities, weather, crop=crop, as_of=as_of)
    if score is None:
        return None

    selected = filter_by_crop(entities, crop)
    return SustainabilityReport(
        score=score,
        water_savings=water_savings(selected),
        chemical_reduction=round(organic_application_ratio(selected) * 100),
        organic_practices_adoption=organic_practices_adoption(selected),
        recommendations=recommend(score.metrics),
    )


def cost_breakdown(
    entries: list[FinancialEntry],
    entity_ids: set | None = None,
) -> dict[str, float]:
    """
    Group expenses into the standard cost categories.

    Types that match no category (case-insensitive) land in "Other".

    Args:
        entries: Financial entries
        entity_ids: Only count expenses of these entities (all when None)

    Returns:
        Category name -> total, in COST_CATEGORIES order
    """
    totals = {name: 0.0 for name in COST_CATEGORIES}
    by_lower = {name.lower(): name for name in COST_CATEGORIES}

    for entry in entries:
        if entry.category != "expense":
            continue
        if entity_ids is not None and entry.entity_id not in entity_ids:
            continue
        name = by_lower.get(entry.type.strip().lower(), "Other")
        totals[name] += entry.amount

    return totals
