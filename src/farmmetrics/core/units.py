"""Unit conversion utilities using pint.

Operational logs are recorded in the units the dashboard collects them in:
- Temperature: Fahrenheit (°F)
- Water: US gallons
- Fertilizer: pounds (lbs)
- Harvest: bushels
- Area: acres

Scoring thresholds are expressed in Celsius, so observations expose a
derived Celsius reading.

Display units are controlled by settings.display_units:
- "imperial": Display as recorded (°F, gal, ac)
- "metric": Convert to °C, liters, hectares

Note: Temperature conversions use simple formulas rather than pint's
offset unit handling, which has ambiguity issues with multiplication.
"""

import pint

from farmmetrics.core.config import settings

# Create a unit registry (lazily initialized)
_ureg: pint.UnitRegistry | None = None


def get_ureg() -> pint.UnitRegistry:
    """Get the pint unit registry (lazily initialized)."""
    global _ureg
    if _ureg is None:
        _ureg = pint.UnitRegistry()
    return _ureg


# =============================================================================
# Temperature Conversions
# =============================================================================


def celsius_to_fahrenheit(temp_c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return temp_c * 9 / 5 + 32


def fahrenheit_to_celsius(temp_f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (temp_f - 32) * 5 / 9


def format_temp(temp_f: float, decimals: int = 0) -> str:
    """Format a Fahrenheit reading for display.

    Args:
        temp_f: Temperature in Fahrenheit
        decimals: Number of decimal places

    Returns:
        Formatted string like "48°F" or "9°C"
    """
    if settings.display_units == "metric":
        value, unit = fahrenheit_to_celsius(temp_f), "°C"
    else:
        value, unit = temp_f, "°F"
    return f"{value:.{decimals}f}{unit}"


# =============================================================================
# Volume / Area Conversions
# =============================================================================


def gallons_to_liters(gallons: float) -> float:
    """Convert US gallons to liters."""
    ureg = get_ureg()
    return (gallons * ureg.gallon).to(ureg.liter).magnitude


def acres_to_hectares(acres: float) -> float:
    """Convert acres to hectares."""
    ureg = get_ureg()
    return (acres * ureg.acre).to(ureg.hectare).magnitude


def format_volume(gallons: float) -> str:
    """Format a water volume for display.

    Returns:
        Formatted string like "1,200 gal" or "4,542 L"
    """
    if settings.display_units == "metric":
        return f"{gallons_to_liters(gallons):,.0f} L"
    return f"{gallons:,.0f} gal"


def format_area(acres: float) -> str:
    """Format an area for display.

    Returns:
        Formatted string like "40.0 ac" or "16.2 ha"
    """
    if settings.display_units == "metric":
        return f"{acres_to_hectares(acres):,.1f} ha"
    return f"{acres:,.1f} ac"


def format_money(amount: float) -> str:
    """Format a currency amount like "$1,250.00" or "-$300.00"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{settings.currency_symbol}{abs(amount):,.2f}"


# =============================================================================
# Display Unit Info
# =============================================================================


def get_temp_unit() -> str:
    """Get the temperature unit symbol for current display settings."""
    return "°F" if settings.display_units == "imperial" else "°C"


def is_imperial() -> bool:
    """Check if display units are imperial."""
    return settings.display_units == "imperial"
