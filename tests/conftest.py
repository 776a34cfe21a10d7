"""Shared fixtures: sample Open-Meteo payloads and settings isolation."""

from __future__ import annotations

import copy
import os
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import Mock

import pytest

from weather_widget.config import get_settings

SAMPLE_FORECAST: dict[str, Any] = {
    "latitude": 51.05,
    "longitude": -114.06,
    "timezone": "America/Edmonton",
    "current_weather": {
        "time": "2026-10-19T10:00",
        "temperature": 20.0,
        "windspeed": 10.0,
        "winddirection": 270,
        "weathercode": 2,
        "is_day": 1,
    },
    "daily": {
        "time": [
            "2026-10-19",
            "2026-10-20",
            "2026-10-21",
            "2026-10-22",
            "2026-10-23",
            "2026-10-24",
            "2026-10-25",
        ],
        "weathercode": [0, 1, 2, 3, 61, 71, 95],
        "temperature_2m_max": [22.0, 21.5, 19.0, 18.2, 15.0, 3.0, 17.0],
        "temperature_2m_min": [11.0, 10.5, 9.0, 8.1, 7.0, -2.0, 9.5],
        "precipitation_probability_mean": [0, 5, 10, 20, 80, 65, 70],
        "precipitation_sum": [0.0, 0.0, 0.0, 0.2, 12.4, 3.1, 8.0],
        "wind_speed_10m_max": [12.0, 14.3, 9.0, 11.0, 25.6, 18.0, 30.2],
        "wind_gusts_10m_max": [25.0, 28.1, 20.0, 22.0, 48.0, 35.0, 61.0],
        "relative_humidity_2m_mean": [50, 55, 60, 62, 88, 90, 75],
        "apparent_temperature_max": [21.0, 20.9, 18.0, 17.0, 13.0, -1.0, 16.0],
    },
}


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ignore the developer's WEATHER_WIDGET_* env and rebuild settings per test."""
    for name in list(os.environ):
        if name.startswith("WEATHER_WIDGET_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """A fresh copy of a realistic Open-Meteo forecast response."""
    return copy.deepcopy(SAMPLE_FORECAST)


@pytest.fixture
def json_response() -> Callable[[object], Mock]:
    """Factory for stand-ins of ``requests.Response`` whose ``.json()`` returns a payload."""

    def _make(payload: object) -> Mock:
        response = Mock()
        response.json.return_value = payload
        response.raise_for_status = Mock()
        return response

    return _make
