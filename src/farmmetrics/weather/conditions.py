"""
Weather observations and day-matching lookups.

The weather feed (an external forecast provider) delivers one record per
day with a high temperature and a free-text condition label. The label is
classified into a small closed set of conditions once, when the observation
is built, so scoring code only ever matches on WeatherCondition members.

Two inputs are accepted for classification:
- Free-text labels ("Heavy Rain", "Partly cloudy", "Thunderstorm")
- Open-Meteo WMO weather codes (https://open-meteo.com/en/docs)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum

from farmmetrics.core.parsing import parse_amount, parse_date, require_int
from farmmetrics.core.units import fahrenheit_to_celsius


class WeatherCondition(Enum):
    """Closed vocabulary of daily weather conditions."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"
    UNKNOWN = "unknown"

    @property
    def is_wet(self) -> bool:
        """Rainfall reached the ground (rain, drizzle, showers, storms)."""
        return self in (WeatherCondition.RAIN, WeatherCondition.STORM)

    @classmethod
    def from_label(cls, label: str | None) -> WeatherCondition:
        """Classify a free-text condition label.

        Order matters: "Thunderstorm with rain" is a storm, "Rain and snow"
        is rain.
        """
        if not label:
            return cls.UNKNOWN
        text = label.lower()
        for condition, keywords in _LABEL_KEYWORDS:
            if any(keyword in text for keyword in keywords):
                return condition
        return cls.UNKNOWN

    @classmethod
    def from_wmo_code(cls, code: int | None) -> WeatherCondition:
        """Classify an Open-Meteo WMO weather interpretation code."""
        if code is None:
            return cls.UNKNOWN
        for condition, codes in _WMO_CODES:
            if code in codes:
                return condition
        return cls.UNKNOWN


_LABEL_KEYWORDS: list[tuple[WeatherCondition, tuple[str, ...]]] = [
    (WeatherCondition.STORM, ("storm", "thunder")),
    (WeatherCondition.RAIN, ("rain", "drizzle", "shower")),
    (WeatherCondition.SNOW, ("snow", "sleet", "flurr", "hail")),
    (WeatherCondition.CLOUDY, ("cloud", "overcast", "fog", "mist", "haze")),
    (WeatherCondition.CLEAR, ("clear", "sun", "fair")),
]

_WMO_CODES: list[tuple[WeatherCondition, range | tuple[int, ...]]] = [
    (WeatherCondition.CLEAR, (0, 1)),
    (WeatherCondition.CLOUDY, (2, 3, 45, 48)),
    (WeatherCondition.RAIN, (51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82)),
    (WeatherCondition.SNOW, (71, 73, 75, 77, 85, 86)),
    (WeatherCondition.STORM, range(95, 100)),
]


@dataclass(frozen=True)
class WeatherObservation:
    """One day of weather from the feed."""

    date: date | None
    high_temp_f: float | None
    condition_label: str = ""
    condition: WeatherCondition = field(default=WeatherCondition.UNKNOWN)
    precipitation_mm: float | None = None

    @property
    def high_temp_c(self) -> float | None:
        if self.high_temp_f is None:
            return None
        return fahrenheit_to_celsius(self.high_temp_f)

    @property
    def is_wet(self) -> bool:
        return self.condition.is_wet

    @classmethod
    def from_dict(cls, data: dict) -> WeatherObservation:
        """Build from a feed record.

        Recognized keys: date, temp (°F), weather (label), weather_code
        (WMO), precipitation (mm). A WMO code wins over the label.
        """
        label = str(data.get("weather") or data.get("condition") or "")
        code = data.get("weather_code")
        if code is not None:
            condition = WeatherCondition.from_wmo_code(require_int(code, "weather_code"))
        else:
            condition = WeatherCondition.from_label(label)

        return cls(
            date=parse_date(data.get("date")),
            high_temp_f=parse_amount(data.get("temp")),
            condition_label=label,
            condition=condition,
            precipitation_mm=parse_amount(data.get("precipitation")),
        )


@dataclass(frozen=True)
class WeatherContext:
    """Weather on a given day and on the day before it."""

    same_day: WeatherObservation | None
    previous_day: WeatherObservation | None


def find_weather(
    weather: list[WeatherObservation],
    on: date | datetime | str | None,
) -> WeatherObservation | None:
    """
    Find the observation for a calendar day.

    Args:
        weather: Weather series (any order)
        on: Day to look up; time of day is ignored

    Returns:
        The first matching observation, or None when the day is missing
        or `on` is not a valid date
    """
    day = parse_date(on)
    if day is None:
        return None
    for observation in weather:
        if observation.date == day:
            return observation
    return None


def weather_context(
    weather: list[WeatherObservation],
    on: date | datetime | str | None,
) -> WeatherContext:
    """Look up the weather on `on` and on the previous day."""
    day = parse_date(on)
    if day is None:
        return WeatherContext(same_day=None, previous_day=None)
    return WeatherContext(
        same_day=find_weather(weather, day),
        previous_day=find_weather(weather, day - timedelta(days=1)),
    )


def current_weather(
    weather: list[WeatherObservation],
    as_of: date | None = None,
) -> WeatherObservation | None:
    """
    Pick today's observation from a feed.

    With `as_of`, the observation for that day (or None). Without it, the
    first record of the feed, which forecast providers deliver as today.
    """
    if as_of is not None:
        return find_weather(weather, as_of)
    return weather[0] if weather else None
