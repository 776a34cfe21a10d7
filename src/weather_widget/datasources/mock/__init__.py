"""Locally generated placeholder weather (no network access).

Public API:
  - generator: generate_mock_report, generate_mock_daily
"""

from weather_widget.datasources.mock.generator import (
    MOCK_WEATHER_CODES,
    generate_mock_daily,
    generate_mock_report,
)

__all__ = ["MOCK_WEATHER_CODES", "generate_mock_daily", "generate_mock_report"]
