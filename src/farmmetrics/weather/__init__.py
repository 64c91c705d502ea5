"""Weather observations and lookups.

Fetching weather over HTTP is the job of the caller; this package only
models the already-fetched daily series.
"""

from farmmetrics.weather.conditions import (
    WeatherCondition,
    WeatherContext,
    WeatherObservation,
    current_weather,
    find_weather,
    weather_context,
)

__all__ = [
    "WeatherCondition",
    "WeatherObservation",
    "WeatherContext",
    "find_weather",
    "weather_context",
    "current_weather",
]
