"""
Apparent ("feels like") temperature for the current moment.

Steadman-style approximation from temperature, wind and relative humidity::

    e          = (rh / 100) * 6.105 * exp(17.27 * T / (237.7 + T))
    feels_like = T + 0.33 * e - 0.7 * wind_ms - 4.0

The formula expects Celsius but is applied to the report's temperature as
displayed, so in Fahrenheit mode the result is not a true apparent
temperature. Callers get exactly what the widget has always shown.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weather_widget.schemas import WeatherReport

KMH_PER_MS = 3.6


def round_half_up(value: float, ndigits: int = 1) -> float:
    """Round ties away from zero, on the exact binary value of ``value``."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_feels_like(temp: float, wind_kmh: float, humidity_pct: float) -> float:
    """
    Feels-like temperature, rounded to one decimal.

    Args:
        temp: Air temperature (Celsius basis).
        wind_kmh: Wind speed in km/h.
        humidity_pct: Relative humidity, 0-100.
    """
    wind_ms = wind_kmh / KMH_PER_MS
    vapour_pressure = humidity_pct / 100 * 6.105 * math.exp(17.27 * temp / (237.7 + temp))
    return round_half_up(temp + 0.33 * vapour_pressure - 0.7 * wind_ms - 4.0)


def feels_like(report: WeatherReport) -> float | None:
    """Feels-like for ``report``'s current conditions, using today's mean humidity.

    ``None`` when upstream sent no humidity for today.
    """
    humidity = report.daily.relative_humidity_2m_mean[0]
    if humidity is None:
        return None
    return compute_feels_like(report.current.temperature, report.current.wind_speed, humidity)
