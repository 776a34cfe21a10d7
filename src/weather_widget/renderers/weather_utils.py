"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from weather_widget.schemas import UnitSystem


@dataclass(frozen=True)
class Condition:
    """Display label plus the Font Awesome icon and colour for a weather code."""

    label: str
    icon: str
    color: str


SUNNY = Condition("Sunny", "fa-sun", "#f9d71c")
PARTLY_CLOUDY = Condition("Partly Cloudy", "fa-cloud-sun", "#fbbf24")
CLOUDY = Condition("Cloudy", "fa-cloud", "rgb(172, 195, 220)")
RAINY = Condition("Rainy", "fa-cloud-showers-heavy", "rgb(13, 100, 240)")
SNOWY = Condition("Snowy", "fa-snowflake", "#bae6fd")
THUNDERSTORM = Condition("Thunderstorm", "fa-bolt", "#facc15")

# WMO weather codes the widget distinguishes (https://open-meteo.com/en/docs)
CONDITIONS: dict[int, Condition] = {
    0: SUNNY,
    1: PARTLY_CLOUDY,
    2: PARTLY_CLOUDY,
    3: CLOUDY,
    61: RAINY,
    71: SNOWY,
    95: THUNDERSTORM,
}

DEFAULT_CONDITION = CLOUDY

#: Shown in place of a value upstream did not provide.
MISSING = "n/a"


def classify(code: int | None) -> Condition:
    """Map a weather code to its condition; unknown or missing codes are shown as Cloudy."""
    if code is None:
        return DEFAULT_CONDITION
    return CONDITIONS.get(code, DEFAULT_CONDITION)


def unit_symbol(unit: UnitSystem) -> str:
    """``°C`` or ``°F``."""
    return "°C" if unit is UnitSystem.CELSIUS else "°F"


def format_number(value: float | None) -> str:
    """Drop a trailing ``.0`` so whole numbers render as ``18`` rather than ``18.0``."""
    if value is None:
        return MISSING
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_tenths(value: float | None) -> str:
    """One decimal place, as the feels-like value is shown."""
    if value is None:
        return MISSING
    return f"{value:.1f}"


def daily_average(temp_max: float | None, temp_min: float | None) -> int | None:
    """Midpoint of max and min, rounded with halves going up. ``None`` if either is missing."""
    if temp_max is None or temp_min is None:
        return None
    return math.floor((temp_max + temp_min) / 2 + 0.5)
