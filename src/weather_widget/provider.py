"""Produce a normalized ``WeatherReport`` from mock or live data."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from weather_widget.datasources.mock.generator import generate_mock_report
from weather_widget.datasources.openmeteo.forecast import fetch_forecast
from weather_widget.schemas import Coordinates, DataMode, UnitSystem, WeatherReport


@dataclass
class WeatherDataProvider:
    """
    Weather for a location, in one shape regardless of source.

    Every call builds a fresh report; reports are immutable and are
    replaced, never updated.
    """

    fetcher: Callable[[Coordinates, UnitSystem], WeatherReport] = fetch_forecast
    rng: random.Random = field(default_factory=random.Random)

    def get_report(
        self, coordinates: Coordinates, unit: UnitSystem, mode: DataMode
    ) -> WeatherReport:
        """
        Build the report for ``coordinates`` in ``unit``.

        Raises:
            UpstreamUnavailable: Live mode, and the forecast request failed.
            MalformedResponse: Live mode, and the payload is missing 7-day arrays.
        """
        if mode is DataMode.MOCK:
            return generate_mock_report(coordinates, unit, rng=self.rng)
        return self.fetcher(coordinates, unit)
