"""
Randomized placeholder weather for the mock cities.

Builds the same ``WeatherReport`` shape the live forecast produces, so
nothing downstream needs to know which source it came from.
"""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta

from weather_widget.reference.mock_locations import mock_city_at
from weather_widget.schemas import (
    FORECAST_DAYS,
    Coordinates,
    CurrentConditions,
    DailySeries,
    UnitSystem,
    WeatherReport,
)

logger = logging.getLogger(__name__)

#: Codes the generator draws from (one per condition the widget can show).
MOCK_WEATHER_CODES = (0, 1, 2, 3, 61, 71, 95)


def generate_mock_daily(
    base: float,
    *,
    rng: random.Random | None = None,
    start: date | None = None,
) -> DailySeries:
    """
    Synthesize a 7-day series around ``base``.

    Max and min are drawn independently (``base + 0..4`` and ``base - 0..4``);
    both are anchored on ``base``, so a day never has min above max.

    Args:
        base: Base temperature in the report's unit.
        rng: Random source; pass a seeded ``random.Random`` for reproducible output.
        start: First day of the series (default: today, local date).
    """
    rng = rng or random.Random()
    start = start or date.today()
    days = range(FORECAST_DAYS)
    return DailySeries(
        time=[start + timedelta(days=i) for i in days],
        temperature_2m_max=[base + rng.randint(0, 4) for _ in days],
        temperature_2m_min=[base - rng.randint(0, 4) for _ in days],
        wind_speed_10m_max=[10 + rng.randint(0, 4) for _ in days],
        wind_gusts_10m_max=[20 + rng.randint(0, 9) for _ in days],
        relative_humidity_2m_mean=[50 + rng.randint(0, 9) for _ in days],
        apparent_temperature_max=[base + rng.randint(0, 2) for _ in days],
        precipitation_probability_mean=[rng.randint(0, 49) for _ in days],
        precipitation_sum=[rng.randint(0, 9) for _ in days],
        weathercode=[rng.choice(MOCK_WEATHER_CODES) for _ in days],
    )


def generate_mock_report(
    coordinates: Coordinates,
    unit: UnitSystem,
    *,
    rng: random.Random | None = None,
    start: date | None = None,
) -> WeatherReport:
    """
    Build a mock report for the mock city at ``coordinates``.

    Current temperature is the city's base value and current wind is its
    fixed constant; only the daily series is randomized. The values are the
    same for every ``unit``: only the displayed symbol follows it.

    Raises:
        ValueError: ``coordinates`` are not one of the mock cities.
    """
    city = mock_city_at(coordinates)
    base = city.temperature_c
    logger.debug("Generating mock weather for %s (base %s, %s)", city.name, base, unit)
    return WeatherReport(
        current=CurrentConditions(temperature=base, wind_speed=city.wind_speed_kmh),
        daily=generate_mock_daily(base, rng=rng, start=start),
    )
