"""Parsers for values that arrive as user-entered text.

The lenient parsers never raise: dates become None (which never matches
a weather day or a year) and unusable areas become 0.0 (which contributes
nothing to per-area usage). Values a record cannot do without go through
require_int, which raises FarmDataError instead.
"""

import math
from datetime import date, datetime


class FarmDataError(ValueError):
    """Raised when a serialized record is structurally invalid."""


def parse_date(value: date | datetime | str | None) -> date | None:
    """Parse a calendar date, stripping any time of day.

    Accepts date/datetime objects and ISO-8601 strings ("2024-05-01",
    "2024-05-01T14:30:00", "2024-05-01T14:30:00Z").

    Returns:
        The date, or None when the value is missing or malformed
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None

def parse_area(value: float | int | str | None) -> float:
    """Parse a field/farm size in acres.

    Missing, non-numeric, non-finite and non-positive sizes all parse
    to 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        area = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(area) or area <= 0:
        return 0.0
    return area

def parse_amount(value: float | int | str | None) -> float | None:
    """Parse a logged quantity; None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None

def require_int(value: float | int | str | None, name: str) -> int:
    """Parse a whole number (codes, years, months) or raise FarmDataError."""
    number = parse_amount(value)
    if number is None or not number.is_integer():
        raise FarmDataError(f"Expected a whole number for {name!r}, got {value!r}")
    return int(number)
