"""Tests for widget state, event dispatch and the effect runner."""

from __future__ import annotations

import random
from typing import Any
from unittest.mock import Mock, patch

import pytest

from weather_widget.errors import MalformedResponse, NoMatchFound, UpstreamUnavailable
from weather_widget.locations import LocationResolver
from weather_widget.provider import WeatherDataProvider
from weather_widget.reference import MOCK_CITIES
from weather_widget.schemas import Coordinates, Country, DataMode, UnitSystem, WeatherReport
from weather_widget.session import (
    FetchReport,
    LoadLocations,
    ResolveCity,
    SelectCity,
    SelectCountry,
    SelectDataSource,
    ToggleTheme,
    ToggleUnit,
    WidgetContext,
    WidgetSession,
    dispatch,
)

PARIS = Coordinates(latitude=48.85341, longitude=2.3488)
LYON = Coordinates(latitude=45.74846, longitude=4.84671)
CALGARY = MOCK_CITIES["Calgary"].coordinates

LIVE_COUNTRIES = [
    Country(country="Canada", cities=["Airdrie", "Calgary"]),
    Country(country="France", cities=["Paris", "Lyon"]),
    Country(country="Nauru", cities=[]),
]


def mock_session() -> WidgetSession:
    return WidgetSession(provider=WeatherDataProvider(rng=random.Random(0)))


def live_session(
    report: WeatherReport, geocoder: Mock | None = None, fetcher: Mock | None = None
) -> WidgetSession:
    geocoder = geocoder or Mock(
        side_effect=lambda name: {"Paris": PARIS, "Lyon": LYON}.get(name, CALGARY)
    )
    fetcher = fetcher or Mock(return_value=report)
    return WidgetSession(
        resolver=LocationResolver(geocoder=geocoder),
        provider=WeatherDataProvider(fetcher=fetcher),
    )


@pytest.fixture
def live_report(forecast_payload: dict[str, Any]) -> WeatherReport:
    return WeatherReport.model_validate(forecast_payload)


class TestDispatch:
    """The pure event -> (context, effect) mapping."""

    def test_toggle_theme_has_no_effect(self) -> None:
        context, effect = dispatch(WidgetContext(), ToggleTheme())
        assert context.dark_mode is True
        assert effect is None
        context, _ = dispatch(context, ToggleTheme())
        assert context.dark_mode is False

    def test_toggle_unit_without_location(self) -> None:
        context, effect = dispatch(WidgetContext(), ToggleUnit())
        assert context.unit is UnitSystem.FAHRENHEIT
        assert effect is None

    def test_toggle_unit_refetches(self) -> None:
        start = WidgetContext(coordinates=PARIS, generation=3)
        context, effect = dispatch(start, ToggleUnit())
        assert context.unit is UnitSystem.FAHRENHEIT
        assert effect == FetchReport(PARIS, 4)
        assert context.generation == 4

    def test_select_city(self) -> None:
        context, effect = dispatch(WidgetContext(), SelectCity("Toronto"))
        assert context.city == "Toronto"
        assert effect == ResolveCity("Toronto", 1)

    def test_select_country_picks_first_city(self) -> None:
        start = WidgetContext(countries=tuple(LIVE_COUNTRIES))
        context, effect = dispatch(start, SelectCountry("France"))
        assert (context.country, context.city) == ("France", "Paris")
        assert effect == ResolveCity("Paris", 1)

    def test_select_country_without_cities(self) -> None:
        start = WidgetContext(countries=tuple(LIVE_COUNTRIES), city="Paris")
        context, effect = dispatch(start, SelectCountry("Nauru"))
        assert context.country == "Nauru"
        assert context.city is None
        assert effect is None

    def test_select_data_source(self) -> None:
        start = WidgetContext(countries=tuple(LIVE_COUNTRIES), error="old", generation=5)
        context, effect = dispatch(start, SelectDataSource(DataMode.LIVE))
        assert context.mode is DataMode.LIVE
        assert context.countries == ()
        assert context.error is None
        assert effect == LoadLocations(DataMode.LIVE, 6)

    def test_toggle_unit_after_source_switch_waits_for_locations(self) -> None:
        """Coordinates from the previous source are never fetched in the new mode."""
        start = WidgetContext(mode=DataMode.LIVE, city="Paris", coordinates=PARIS, generation=2)
        switched, _ = dispatch(start, SelectDataSource(DataMode.MOCK))
        assert switched.coordinates is None

        context, effect = dispatch(switched, ToggleUnit())
        assert context.unit is UnitSystem.FAHRENHEIT
        assert effect is None

    def test_does_not_mutate_input(self) -> None:
        start = WidgetContext()
        dispatch(start, ToggleUnit())
        dispatch(start, SelectCity("Toronto"))
        assert start == WidgetContext()

    def test_unknown_event(self) -> None:
        with pytest.raises(TypeError):
            dispatch(WidgetContext(), object())  # type: ignore[arg-type]


class TestMockSession:
    """End to end in mock mode (no network)."""

    @patch("weather_widget.services.http.session.get")
    def test_start_shows_calgary(self, mock_get: Mock) -> None:
        context = mock_session().start()

        assert context.mode is DataMode.MOCK
        assert (context.country, context.city) == ("Canada", "Calgary")
        assert context.coordinates == CALGARY
        assert context.report is not None
        assert context.report.current.temperature == 18
        assert context.error is None
        mock_get.assert_not_called()

    def test_select_city(self) -> None:
        session = mock_session()
        context = session.handle(session.start(), SelectCity("Toronto"))
        assert context.coordinates == MOCK_CITIES["Toronto"].coordinates
        assert context.report is not None
        assert context.report.current.temperature == 22

    def test_toggle_unit_builds_new_report(self) -> None:
        session = mock_session()
        before = session.start()
        after = session.handle(before, ToggleUnit())

        assert after.unit is UnitSystem.FAHRENHEIT
        assert after.report is not before.report
        assert after.report is not None
        assert after.report.current.temperature == 18

    def test_unit_toggle_before_locations_load(self, live_report: WeatherReport) -> None:
        """Switching live -> mock then toggling the unit ends on a mock city."""
        live = live_session(live_report)
        context = live.handle(WidgetContext(mode=DataMode.LIVE), SelectCity("Paris"))
        assert context.coordinates == PARIS

        session = mock_session()
        context, pending = dispatch(context, SelectDataSource(DataMode.MOCK))
        context, toggled = dispatch(context, ToggleUnit())
        assert toggled is None

        effect = pending
        while effect is not None:
            context, effect = session.run_effect(context, effect)

        assert context.error is None
        assert (context.city, context.unit) == ("Calgary", UnitSystem.FAHRENHEIT)
        assert context.coordinates == CALGARY
        assert context.report is not None
        assert context.report.current.temperature == 18

    def test_toggle_theme_keeps_report(self) -> None:
        session = mock_session()
        before = session.start()
        after = session.handle(before, ToggleTheme())
        assert after.dark_mode is True
        assert after.report is before.report

    def test_configured_default_city(self) -> None:
        session = WidgetSession(default_city="Vancouver")
        assert session.start().city == "Vancouver"


class TestLiveSession:
    """Live mode with stubbed geocoding, forecast and country list."""

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    def test_start_selects_default_city(
        self, _mock_list: Mock, live_report: WeatherReport
    ) -> None:
        fetcher = Mock(return_value=live_report)
        session = live_session(live_report, fetcher=fetcher)

        context = session.start(WidgetContext(mode=DataMode.LIVE))

        assert (context.country, context.city) == ("Canada", "Calgary")
        assert context.report is live_report
        fetcher.assert_called_once_with(CALGARY, UnitSystem.CELSIUS)

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    def test_start_falls_back_to_first_city(
        self, _mock_list: Mock, live_report: WeatherReport
    ) -> None:
        session = live_session(live_report)
        session.default_country = "France"
        session.default_city = "Marseille"

        context = session.start(WidgetContext(mode=DataMode.LIVE))

        assert (context.country, context.city) == ("France", "Paris")
        assert context.coordinates == PARIS

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    def test_select_country(self, _mock_list: Mock, live_report: WeatherReport) -> None:
        session = live_session(live_report)
        context = session.start(WidgetContext(mode=DataMode.LIVE))

        context = session.handle(context, SelectCountry("France"))

        assert context.city == "Paris"
        assert context.coordinates == PARIS

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    def test_toggle_unit_requests_new_unit(
        self, _mock_list: Mock, live_report: WeatherReport
    ) -> None:
        fetcher = Mock(return_value=live_report)
        session = live_session(live_report, fetcher=fetcher)
        context = session.start(WidgetContext(mode=DataMode.LIVE))

        session.handle(context, ToggleUnit())

        units = [c.args[1] for c in fetcher.call_args_list]
        assert units == [UnitSystem.CELSIUS, UnitSystem.FAHRENHEIT]

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    def test_no_match_keeps_previous_report(
        self, _mock_list: Mock, live_report: WeatherReport
    ) -> None:
        def geocode(name: str) -> Coordinates:
            if name == "Qwxzzyv":
                raise NoMatchFound(name)
            return CALGARY

        fetcher = Mock(return_value=live_report)
        session = live_session(live_report, geocoder=Mock(side_effect=geocode), fetcher=fetcher)
        before = session.start(WidgetContext(mode=DataMode.LIVE))

        after = session.handle(before, SelectCity("Qwxzzyv"))

        assert after.report is before.report
        assert after.coordinates == before.coordinates
        assert after.error is not None
        assert "Qwxzzyv" in after.error
        assert fetcher.call_count == 1

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    @pytest.mark.parametrize(
        "error",
        [
            UpstreamUnavailable("https://api.open-meteo.com/v1/forecast", status_code=502),
            MalformedResponse("https://api.open-meteo.com/v1/forecast", "3 invalid field(s)"),
        ],
    )
    def test_fetch_failure_keeps_previous_report(
        self, _mock_list: Mock, error: Exception, live_report: WeatherReport
    ) -> None:
        fetcher = Mock(side_effect=[live_report, error])
        session = live_session(live_report, fetcher=fetcher)
        before = session.start(WidgetContext(mode=DataMode.LIVE))

        after = session.handle(before, SelectCity("Paris"))

        assert after.report is before.report
        assert after.error == str(error)

    @patch("weather_widget.session.list_countries", return_value=LIVE_COUNTRIES)
    def test_success_clears_error(self, _mock_list: Mock, live_report: WeatherReport) -> None:
        fetcher = Mock(side_effect=[live_report, UpstreamUnavailable("u"), live_report])
        session = live_session(live_report, fetcher=fetcher)
        context = session.start(WidgetContext(mode=DataMode.LIVE))

        context = session.handle(context, SelectCity("Paris"))
        assert context.error is not None
        context = session.handle(context, SelectCity("Lyon"))
        assert context.error is None
        assert context.coordinates == LYON

    @patch(
        "weather_widget.session.list_countries",
        side_effect=UpstreamUnavailable("https://countriesnow.space/api/v0.1/countries"),
    )
    def test_country_list_failure(self, _mock_list: Mock, live_report: WeatherReport) -> None:
        session = live_session(live_report)
        context = session.start(WidgetContext(mode=DataMode.LIVE))
        assert context.countries == ()
        assert context.report is None
        assert context.error is not None


class TestStaleResults:
    """Superseded effects are dropped."""

    def test_older_generation_is_dropped(self, live_report: WeatherReport) -> None:
        fetcher = Mock(return_value=live_report)
        session = live_session(live_report, fetcher=fetcher)
        start = WidgetContext(mode=DataMode.LIVE)

        first_ctx, first_effect = dispatch(start, SelectCity("Paris"))
        latest_ctx, _ = dispatch(first_ctx, SelectCity("Lyon"))

        context, effect = session.run_effect(latest_ctx, first_effect)

        assert context is latest_ctx
        assert effect is None
        fetcher.assert_not_called()

    def test_stale_fetch_does_not_overwrite(self, live_report: WeatherReport) -> None:
        fetcher = Mock(return_value=live_report)
        session = live_session(live_report, fetcher=fetcher)
        context = WidgetContext(mode=DataMode.LIVE, coordinates=PARIS, generation=2)

        context, effect = session.run_effect(context, FetchReport(PARIS, 1))

        assert context.report is None
        assert effect is None

    def test_resolve_chains_into_fetch(self, live_report: WeatherReport) -> None:
        session = live_session(live_report)
        context, effect = dispatch(WidgetContext(mode=DataMode.LIVE), SelectCity("Paris"))

        context, effect = session.run_effect(context, effect)  # type: ignore[arg-type]

        assert context.coordinates == PARIS
        assert effect == FetchReport(PARIS, context.generation)


class TestWidgetContext:
    def test_cities_for_selected_country(self) -> None:
        context = WidgetContext(countries=tuple(LIVE_COUNTRIES), country="France")
        assert context.cities() == ["Paris", "Lyon"]
        assert context.cities("Canada") == ["Airdrie", "Calgary"]
        assert context.cities("Atlantis") == []

    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from weather_widget.config import get_settings

        monkeypatch.setenv("WEATHER_WIDGET_DEFAULT_CITY", "Toronto")
        session = WidgetSession.from_settings(get_settings())
        assert session.default_city == "Toronto"
        assert session.default_country == "Canada"
