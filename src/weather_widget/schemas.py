"""
Domain models for the weather widget.

Pydantic models for data from external APIs and internal processing.
Field names of the report models are the Open-Meteo names, so a live
forecast payload validates straight into ``WeatherReport`` and the mock
generator builds the very same shape.
"""

from __future__ import annotations

from datetime import date  # noqa: TC003 (pydantic resolves annotations at runtime)
from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

#: Number of days in every daily series.
FORECAST_DAYS = 7

#: A daily metric. Open-Meteo sends ``null`` for days it has no value for.
Week = Annotated[list[float | None], Field(min_length=FORECAST_DAYS, max_length=FORECAST_DAYS)]
Codes = Annotated[list[int | None], Field(min_length=FORECAST_DAYS, max_length=FORECAST_DAYS)]

# =============================================================================
# Enums
# =============================================================================


class UnitSystem(StrEnum):
    """Temperature unit. The value is Open-Meteo's ``temperature_unit``."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    def toggled(self) -> UnitSystem:
        """The other unit."""
        return UnitSystem.FAHRENHEIT if self is UnitSystem.CELSIUS else UnitSystem.CELSIUS


class DataMode(StrEnum):
    """Where weather data comes from."""

    MOCK = "mock"
    LIVE = "live"


# =============================================================================
# Location
# =============================================================================


class Coordinates(BaseModel):
    """A resolved geographic point."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Country(BaseModel):
    """A country and the city names offered for it."""

    model_config = ConfigDict(frozen=True)

    country: str
    cities: list[str] = Field(default_factory=list)


# =============================================================================
# Weather
# =============================================================================


class CurrentConditions(BaseModel):
    """Conditions right now (Open-Meteo ``current_weather``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: float
    wind_speed: float = Field(..., alias="windspeed", description="km/h")


class DayForecast(BaseModel):
    """One day sliced out of a ``DailySeries``."""

    model_config = ConfigDict(frozen=True)

    date: date
    temp_max: float | None
    temp_min: float | None
    wind_speed_max: float | None
    wind_gust_max: float | None
    humidity_mean: float | None
    apparent_temp_max: float | None
    precip_probability_mean: float | None
    precip_sum: float | None
    weather_code: int | None


class DailySeries(BaseModel):
    """
    Seven index-aligned daily sequences starting today.

    Index ``i`` of every list refers to the same calendar day. Temperature
    fields are in the report's unit; wind is km/h, humidity and
    precipitation probability are percent, precipitation sum is mm.
    Any entry except a date may be ``None`` when upstream has no value.
    """

    model_config = ConfigDict(frozen=True)

    time: Annotated[list[date], Field(min_length=FORECAST_DAYS, max_length=FORECAST_DAYS)]
    temperature_2m_max: Week
    temperature_2m_min: Week
    wind_speed_10m_max: Week
    wind_gusts_10m_max: Week
    relative_humidity_2m_mean: Week
    apparent_temperature_max: Week
    precipitation_probability_mean: Week
    precipitation_sum: Week
    weathercode: Codes

    def day(self, index: int) -> DayForecast:
        """Return the values for a single day."""
        return DayForecast(
            date=self.time[index],
            temp_max=self.temperature_2m_max[index],
            temp_min=self.temperature_2m_min[index],
            wind_speed_max=self.wind_speed_10m_max[index],
            wind_gust_max=self.wind_gusts_10m_max[index],
            humidity_mean=self.relative_humidity_2m_mean[index],
            apparent_temp_max=self.apparent_temperature_max[index],
            precip_probability_mean=self.precipitation_probability_mean[index],
            precip_sum=self.precipitation_sum[index],
            weather_code=self.weathercode[index],
        )

    def days(self) -> list[DayForecast]:
        """All seven days, in order."""
        return [self.day(i) for i in range(len(self.time))]


class WeatherReport(BaseModel):
    """
    Normalized weather for one location, identical in shape for mock and live data.

    ``model_dump(by_alias=True, mode="json")`` reproduces the upstream JSON
    layout (``current_weather`` + ``daily``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current: CurrentConditions = Field(..., alias="current_weather")
    daily: DailySeries

    @property
    def today(self) -> DayForecast:
        """First day of the series."""
        return self.daily.day(0)
