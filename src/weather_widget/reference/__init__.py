"""Static reference data that doesn't change with API calls.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from weather_widget.reference.mock_locations import DEFAULT_MOCK_CITY as DEFAULT_MOCK_CITY
from weather_widget.reference.mock_locations import MOCK_CITIES as MOCK_CITIES
from weather_widget.reference.mock_locations import MOCK_COUNTRIES as MOCK_COUNTRIES
from weather_widget.reference.mock_locations import MOCK_COUNTRY as MOCK_COUNTRY
from weather_widget.reference.mock_locations import MockCity as MockCity
