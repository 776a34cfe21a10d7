"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - openmeteo/   Forecast (current + 7-day daily) and geocoding
  - countries/   Country/city names for the selection lists
  - mock/        Randomized local data in the same ``WeatherReport`` shape

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.
2. Fetch through the shared session helper, which turns transport failures
   into ``UpstreamUnavailable``::

       from weather_widget.services.http import get_json

       def fetch_something(lat, lon) -> dict[str, Any]:
           return get_json(API_URL, params={...})

3. Validate payloads into ``schemas`` models; raise ``MalformedResponse``
   on ``ValidationError``.
4. Re-export public API in ``__init__.py`` with ``__all__``.
5. Add tests in ``tests/test_{name}.py``.
"""
