"""Fixed locations and base values used in mock mode."""

from __future__ import annotations

from dataclasses import dataclass

from weather_widget.schemas import Coordinates, Country

MOCK_COUNTRY = "Canada"
DEFAULT_MOCK_CITY = "Calgary"


@dataclass(frozen=True)
class MockCity:
    """A mock city: where it is and the constants its weather is built from."""

    name: str
    coordinates: Coordinates
    temperature_c: float
    wind_speed_kmh: float


MOCK_CITIES: dict[str, MockCity] = {
    city.name: city
    for city in (
        MockCity("Calgary", Coordinates(latitude=51.0447, longitude=-114.0719), 18, 12),
        MockCity("Edmonton", Coordinates(latitude=53.5461, longitude=-113.4938), 10, 15),
        MockCity("Toronto", Coordinates(latitude=43.65107, longitude=-79.347015), 22, 9),
        MockCity("Vancouver", Coordinates(latitude=49.2827, longitude=-123.1207), 16, 11),
    )
}

MOCK_COUNTRIES = [Country(country=MOCK_COUNTRY, cities=list(MOCK_CITIES))]


def mock_city_named(name: str) -> MockCity:
    """Look up a mock city by name; the mock dropdown only offers known names."""
    try:
        return MOCK_CITIES[name]
    except KeyError:
        raise ValueError(f"Unknown mock city: {name!r}") from None


def mock_city_at(coordinates: Coordinates) -> MockCity:
    """Look up the mock city whose coordinates are exactly ``coordinates``."""
    for city in MOCK_CITIES.values():
        if city.coordinates == coordinates:
            return city
    raise ValueError(f"No mock city at ({coordinates.latitude}, {coordinates.longitude})")
