"""CountriesNow API constants.

API docs: https://countriesnow.space/
"""

COUNTRIES_API = "https://countriesnow.space/api/v0.1/countries"
