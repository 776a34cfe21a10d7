"""City name -> coordinates via the Open-Meteo Geocoding API."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from weather_widget.datasources.openmeteo.client import OPEN_METEO_GEOCODING
from weather_widget.errors import MalformedResponse, NoMatchFound
from weather_widget.schemas import Coordinates
from weather_widget.services.http import get_json

logger = logging.getLogger(__name__)


def geocode_city(name: str) -> Coordinates:
    """
    Resolve a free-form city name to the coordinates of the best match.

    Only the first result is requested and used.

    Raises:
        NoMatchFound: The service returned no results.
        UpstreamUnavailable: The request failed or returned a non-2xx status.
        MalformedResponse: The first result has no usable coordinates.
    """
    payload = get_json(OPEN_METEO_GEOCODING, params={"name": name, "count": 1})
    results: list[dict[str, Any]] = []
    if isinstance(payload, dict):
        results = payload.get("results") or []

    if not results:
        raise NoMatchFound(name)

    first = results[0]
    try:
        coords = Coordinates(latitude=first.get("latitude"), longitude=first.get("longitude"))
    except (AttributeError, ValidationError) as exc:
        raise MalformedResponse(OPEN_METEO_GEOCODING, f"bad coordinates for {name!r}") from exc

    logger.debug("Geocoded %r to (%s, %s)", name, coords.latitude, coords.longitude)
    return coords
