"""
Irrigation efficiency scoring.

Each irrigation event starts at 100 and loses efficiency when the weather
made it wasteful:

- Watering on a wet day: x0.5
- Watering the day after a wet day: x0.7 (stacks with the above)
- Hot day (high > 30°C / 86°F): x0.9, evaporation loss
- Cold day (high < 10°C / 50°F): x0.95, slow absorption

Penalties compound multiplicatively, so the result never leaves [0, 100].

Two forms are provided:
- score_water_efficiency: the latest event only (the standalone figure)
- average_water_efficiency: the whole history, normalized by field area
  (the sustainability sub-score)
"""

from farmmetrics.data.records import Entity, WaterApplication
from farmmetrics.scoring.base import SCORE_MAX, clamp_score
from farmmetrics.weather.conditions import WeatherObservation, weather_context

WET_DAY_FACTOR = 0.5
WET_PREVIOUS_DAY_FACTOR = 0.7

HOT_DAY_C = 30.0
HOT_DAY_FACTOR = 0.9
COLD_DAY_C = 10.0
COLD_DAY_FACTOR = 0.95

# Gallons per acre that costs one point of area-normalized efficiency
GALLONS_PER_ACRE_PER_POINT = 100.0


def application_efficiency(
    application: WaterApplication,
    weather: list[WeatherObservation],
) -> float:
    """
    Score a single irrigation event against the weather around it.

    Args:
        application: The irrigation event
        weather: Weather series (any order)

    Returns:
        Efficiency score (0-100); 100 when no weather is known for the day
    """
    context = weather_context(weather, application.date)
    efficiency = SCORE_MAX

    if context.same_day is not None and context.same_day.is_wet:
        efficiency *= WET_DAY_FACTOR

    if context.previous_day is not None and context.previous_day.is_wet:
        efficiency *= WET_PREVIOUS_DAY_FACTOR

    high_c = context.same_day.high_temp_c if context.same_day is not None else None
    if high_c is not None:
        if high_c > HOT_DAY_C:
            efficiency *= HOT_DAY_FACTOR
        elif high_c < COLD_DAY_C:
            efficiency *= COLD_DAY_FACTOR

    return efficiency


def latest_application(history: list[WaterApplication]) -> WaterApplication | None:
    """Most recent application by date; undated entries lose to dated ones.

    Ties keep the entry logged last.
    """
    if not history:
        return None
    dated = [(a.date is not None, a.date.toordinal() if a.date else 0, i) for i, a in enumerate(history)]
    _, _, index = max(dated)
    return history[index]


def score_water_efficiency(
    history: list[WaterApplication],
    weather: list[WeatherObservation],
) -> float | None:
    """
    Efficiency of the most recent irrigation event.

    Returns:
        Score (0-100), or None when there is no irrigation history
    """
    latest = latest_application(history)
    if latest is None:
        return None
    return application_efficiency(latest, weather)


def average_water_efficiency(
    entity: Entity,
    weather: list[WeatherObservation],
) -> float | None:
    """
    History-averaged, area-normalized water efficiency for an entity.

    The weather-adjusted volume per acre sets a usage score
    (100 minus one point per 100 gal/acre), which is then scaled by the
    mean per-event efficiency.

    Returns:
        Score (0-100), or None when there is no irrigation history
    """
    history = entity.water_history
    if not history:
        return None

    efficiencies = [application_efficiency(a, weather) for a in history]
    avg_efficiency = sum(efficiencies) / len(efficiencies)

    effective_gallons = sum(a.amount * eff / SCORE_MAX for a, eff in zip(history, efficiencies, strict=True))
    area = entity.area_acres
    gallons_per_acre = effective_gallons / area if area > 0 else 0.0

    usage_score = clamp_score(SCORE_MAX - gallons_per_acre / GALLONS_PER_ACRE_PER_POINT)
    return clamp_score(usage_score * avg_efficiency / SCORE_MAX)
