"""Turn a user's city selection into coordinates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from weather_widget.datasources.openmeteo.geocoding import geocode_city
from weather_widget.reference.mock_locations import mock_city_named
from weather_widget.schemas import Coordinates, DataMode


@dataclass
class LocationResolver:
    """
    Resolve a selected city to coordinates.

    Mock mode looks the name up in the fixed mock table (an unknown name is a
    programming error and raises ``ValueError``). Live mode geocodes the
    free-form name and takes the first match.
    """

    geocoder: Callable[[str], Coordinates] = geocode_city

    def resolve(self, mode: DataMode, selection: str) -> Coordinates:
        """
        Coordinates for ``selection``.

        Raises:
            NoMatchFound: Live mode, and the geocoder found nothing.
            UpstreamUnavailable: Live mode, and the geocoding request failed.
        """
        if mode is DataMode.MOCK:
            return mock_city_named(selection).coordinates
        return self.geocoder(selection)
