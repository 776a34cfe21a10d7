"""Country and city names for the location dropdowns."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from weather_widget.datasources.countries.client import COUNTRIES_API
from weather_widget.errors import MalformedResponse
from weather_widget.reference.mock_locations import MOCK_COUNTRIES
from weather_widget.schemas import Country, DataMode
from weather_widget.services.http import get_json

_countries_adapter = TypeAdapter(list[Country])


def fetch_countries() -> list[Country]:
    """
    Fetch every country with its list of cities.

    Raises:
        UpstreamUnavailable: The request failed or returned a non-2xx status.
        MalformedResponse: The body has no ``data`` list of countries.
    """
    payload = get_json(COUNTRIES_API)
    if not isinstance(payload, dict) or "data" not in payload:
        raise MalformedResponse(COUNTRIES_API, "missing 'data'")
    try:
        return _countries_adapter.validate_python(payload["data"])
    except ValidationError as exc:
        raise MalformedResponse(COUNTRIES_API, f"{exc.error_count()} invalid entries") from exc


def list_countries(mode: DataMode) -> list[Country]:
    """Countries offered for selection: the fixed mock table, or the live list."""
    if mode is DataMode.MOCK:
        return list(MOCK_COUNTRIES)
    return fetch_countries()
