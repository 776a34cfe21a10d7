"""
Widget state and event handling.

The widget's state is one immutable ``WidgetContext``. A UI event goes
through ``dispatch``, a pure function returning the next context and, when
I/O is needed, an effect describing it. ``WidgetSession`` performs effects
(resolving locations, fetching reports) and feeds the results back in::

    session = WidgetSession()
    ctx = session.start()                      # mock data, Calgary
    ctx = session.handle(ctx, ToggleUnit())    # re-fetch in Fahrenheit

Effects that end in a fetch carry the ``generation`` they were issued for.
A result for an older generation has been superseded by a later event and
is dropped instead of replacing the newer state.

Widget errors (no geocoding match, upstream failure, malformed payload) are
recorded in ``context.error``; the previous coordinates and report stay as
they were.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from weather_widget.datasources.countries.listing import list_countries
from weather_widget.errors import WeatherWidgetError
from weather_widget.locations import LocationResolver
from weather_widget.provider import WeatherDataProvider
from weather_widget.reference.mock_locations import DEFAULT_MOCK_CITY, MOCK_COUNTRY
from weather_widget.schemas import Coordinates, Country, DataMode, UnitSystem, WeatherReport

if TYPE_CHECKING:
    from weather_widget.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WidgetContext:
    """Everything the widget shows or needs to issue its next request."""

    mode: DataMode = DataMode.MOCK
    unit: UnitSystem = UnitSystem.CELSIUS
    dark_mode: bool = False
    countries: tuple[Country, ...] = ()
    country: str | None = None
    city: str | None = None
    coordinates: Coordinates | None = None
    report: WeatherReport | None = None
    error: str | None = None
    generation: int = 0

    def cities(self, country: str | None = None) -> list[str]:
        """City names offered for ``country`` (default: the selected one)."""
        wanted = country if country is not None else self.country
        for entry in self.countries:
            if entry.country == wanted:
                return list(entry.cities)
        return []


# =============================================================================
# Events (from the UI)
# =============================================================================


@dataclass(frozen=True)
class SelectDataSource:
    mode: DataMode


@dataclass(frozen=True)
class SelectCountry:
    country: str


@dataclass(frozen=True)
class SelectCity:
    city: str


@dataclass(frozen=True)
class ToggleUnit:
    pass


@dataclass(frozen=True)
class ToggleTheme:
    pass


Event = SelectDataSource | SelectCountry | SelectCity | ToggleUnit | ToggleTheme

# =============================================================================
# Effects (I/O for the session to perform)
# =============================================================================


@dataclass(frozen=True)
class LoadLocations:
    """Populate the country/city lists for ``mode`` and select a default city."""

    mode: DataMode
    generation: int


@dataclass(frozen=True)
class ResolveCity:
    """Resolve ``city`` to coordinates, then fetch its report."""

    city: str
    generation: int


@dataclass(frozen=True)
class FetchReport:
    """Fetch a fresh report for ``coordinates`` in the context's unit and mode."""

    coordinates: Coordinates
    generation: int


Effect = LoadLocations | ResolveCity | FetchReport


def dispatch(context: WidgetContext, event: Event) -> tuple[WidgetContext, Effect | None]:
    """Apply a UI event: return the new context and the effect to perform (if any)."""
    if isinstance(event, ToggleTheme):
        return replace(context, dark_mode=not context.dark_mode), None

    if isinstance(event, ToggleUnit):
        context = replace(context, unit=context.unit.toggled())
        if context.coordinates is None:
            return context, None
        context = replace(context, generation=context.generation + 1)
        return context, FetchReport(context.coordinates, context.generation)

    if isinstance(event, SelectDataSource):
        context = replace(
            context,
            mode=event.mode,
            countries=(),
            country=None,
            city=None,
            coordinates=None,
            error=None,
            generation=context.generation + 1,
        )
        return context, LoadLocations(event.mode, context.generation)

    if isinstance(event, SelectCountry):
        cities = context.cities(event.country)
        context = replace(context, country=event.country, city=cities[0] if cities else None)
        if not cities:
            return context, None
        context = replace(context, generation=context.generation + 1)
        return context, ResolveCity(cities[0], context.generation)

    if isinstance(event, SelectCity):
        context = replace(context, city=event.city, generation=context.generation + 1)
        return context, ResolveCity(event.city, context.generation)

    raise TypeError(f"Unknown event: {event!r}")


@dataclass
class WidgetSession:
    """Runs effects against the resolver and provider."""

    resolver: LocationResolver = field(default_factory=LocationResolver)
    provider: WeatherDataProvider = field(default_factory=WeatherDataProvider)
    default_country: str = MOCK_COUNTRY
    default_city: str = DEFAULT_MOCK_CITY

    @classmethod
    def from_settings(cls, settings: Settings) -> WidgetSession:
        """Session using the default location from settings."""
        return cls(default_country=settings.default_country, default_city=settings.default_city)

    def start(self, context: WidgetContext | None = None) -> WidgetContext:
        """Load locations for the context's mode and show the default city."""
        context = context or WidgetContext()
        return self.handle(context, SelectDataSource(context.mode))

    def handle(self, context: WidgetContext, event: Event) -> WidgetContext:
        """Dispatch ``event`` and run the resulting effects to completion."""
        context, effect = dispatch(context, event)
        while effect is not None:
            context, effect = self.run_effect(context, effect)
        return context

    def run_effect(
        self, context: WidgetContext, effect: Effect
    ) -> tuple[WidgetContext, Effect | None]:
        """Perform one effect; return the updated context and any follow-up effect."""
        if effect.generation != context.generation:
            logger.warning(
                "Dropping stale %s (generation %s, current %s)",
                type(effect).__name__,
                effect.generation,
                context.generation,
            )
            return context, None

        try:
            if isinstance(effect, LoadLocations):
                return self._load_locations(context, effect)
            if isinstance(effect, ResolveCity):
                coordinates = self.resolver.resolve(context.mode, effect.city)
                context = replace(context, coordinates=coordinates)
                return context, FetchReport(coordinates, effect.generation)
            if isinstance(effect, FetchReport):
                report = self.provider.get_report(effect.coordinates, context.unit, context.mode)
                return replace(context, report=report, error=None), None
        except WeatherWidgetError as exc:
            logger.warning("%s failed: %s", type(effect).__name__, exc)
            return replace(context, error=str(exc)), None

        raise TypeError(f"Unknown effect: {effect!r}")

    def _load_locations(
        self, context: WidgetContext, effect: LoadLocations
    ) -> tuple[WidgetContext, Effect | None]:
        countries = list_countries(effect.mode)
        context = replace(context, countries=tuple(countries))
        if not countries:
            return context, None

        names = [c.country for c in countries]
        country = self.default_country if self.default_country in names else names[0]
        cities = context.cities(country)
        if self.default_city in cities:
            city = self.default_city
        elif cities:
            city = cities[0]
        else:
            return replace(context, country=country, city=None), None

        return dispatch(replace(context, country=country), SelectCity(city))
