"""Country/city lists used only to populate the location selection.

Public API:
  - listing: fetch_countries (live), list_countries (mock or live)
"""

from weather_widget.datasources.countries.client import COUNTRIES_API
from weather_widget.datasources.countries.listing import fetch_countries, list_countries

__all__ = ["COUNTRIES_API", "fetch_countries", "list_countries"]
