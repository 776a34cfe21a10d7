"""7-day forecast plus current conditions from the Open-Meteo Forecast API."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from weather_widget.datasources.openmeteo.client import DAILY_VARS, OPEN_METEO_API, WIND_SPEED_UNIT
from weather_widget.errors import MalformedResponse
from weather_widget.schemas import Coordinates, UnitSystem, WeatherReport
from weather_widget.services.http import get_json

logger = logging.getLogger(__name__)


def forecast_params(coordinates: Coordinates, unit: UnitSystem) -> dict[str, str | int | float]:
    """Query parameters for one forecast request."""
    return {
        "latitude": coordinates.latitude,
        "longitude": coordinates.longitude,
        "daily": ",".join(DAILY_VARS),
        "current_weather": "true",
        "temperature_unit": unit.value,
        "wind_speed_unit": WIND_SPEED_UNIT,
        "timezone": "auto",
    }


def fetch_forecast(coordinates: Coordinates, unit: UnitSystem) -> WeatherReport:
    """
    Fetch current conditions and the 7-day daily series for a location.

    The response body is validated as-is into ``WeatherReport``: upstream
    field names are the model's field names, so nothing is remapped.

    Args:
        coordinates: Location to forecast.
        unit: Temperature unit requested from the API (no client-side conversion).

    Raises:
        UpstreamUnavailable: The request failed or returned a non-2xx status.
        MalformedResponse: ``current_weather`` or a 7-day daily array is missing.
    """
    payload = get_json(OPEN_METEO_API, params=forecast_params(coordinates, unit))
    try:
        report = WeatherReport.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse(OPEN_METEO_API, f"{exc.error_count()} invalid field(s)") from exc

    logger.debug(
        "Forecast for (%s, %s) in %s: %s days",
        coordinates.latitude,
        coordinates.longitude,
        unit,
        len(report.daily.time),
    )
    return report
