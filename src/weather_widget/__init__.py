"""Weather Widget - current conditions and a 7-day forecast, mocked or live.

Architecture::

    datasources/   External APIs (Open-Meteo forecast and geocoding, country list)
                   and the mock generator
    reference/     Static mock cities and their base values
    locations.py   LocationResolver: city selection -> coordinates
    provider.py    WeatherDataProvider: coordinates -> normalized WeatherReport
    analysis/      Derived metrics (feels-like temperature)
    session.py     Immutable widget context, event dispatch, effect runner
    renderers/     Pure data -> HTML / text (current card, forecast grid, page)
    flows/         Prefect orchestration (build renders the site)
    services/      Shared utilities (HTTP session)

Data flow: UI event -> session.dispatch -> LocationResolver -> WeatherDataProvider
-> WeatherReport -> renderers.
"""

__version__ = "0.1.0"

from weather_widget.config import Settings
from weather_widget.schemas import Coordinates, DataMode, UnitSystem, WeatherReport

__all__ = ["Coordinates", "DataMode", "Settings", "UnitSystem", "WeatherReport", "__version__"]
