"""Open-Meteo weather data source.

Fetches forecasts and geocodes city names (free, no API key).

Public API:
  - forecast: fetch_forecast (current conditions + 7-day daily series)
  - geocoding: geocode_city (first match for a city name)
  - client: API URLs, shared constants
"""

from weather_widget.datasources.openmeteo.client import (
    DAILY_VARS,
    OPEN_METEO_API,
    OPEN_METEO_GEOCODING,
)
from weather_widget.datasources.openmeteo.forecast import fetch_forecast, forecast_params
from weather_widget.datasources.openmeteo.geocoding import geocode_city

__all__ = [
    "DAILY_VARS",
    "OPEN_METEO_API",
    "OPEN_METEO_GEOCODING",
    "fetch_forecast",
    "forecast_params",
    "geocode_city",
]
