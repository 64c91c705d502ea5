"""Core module - configuration and unit conversion."""

from farmmetrics.core import units
from farmmetrics.core.config import get_cache_dir, get_data_file, settings
from farmmetrics.core.parsing import FarmDataError, parse_amount, parse_area, parse_date, require_int
from farmmetrics.core.units import (
    acres_to_hectares,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    format_area,
    format_money,
    format_temp,
    format_volume,
    gallons_to_liters,
    get_temp_unit,
    is_imperial,
)

__all__ = [
    "units",
    "settings",
    "get_cache_dir",
    "get_data_file",
    # Parsers
    "parse_date",
    "parse_area",
    "parse_amount",
    "require_int",
    "FarmDataError",
    # Unit conversion helpers
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "gallons_to_liters",
    "acres_to_hectares",
    "format_temp",
    "format_volume",
    "format_area",
    "format_money",
    "get_temp_unit",
    "is_imperial",
]
