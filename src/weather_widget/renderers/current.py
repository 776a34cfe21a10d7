"""Today's conditions card."""

from __future__ import annotations

from weather_widget.analysis.feels_like import feels_like
from weather_widget.renderers import render_template
from weather_widget.renderers.date_utils import long_date
from weather_widget.renderers.weather_utils import classify, unit_symbol
from weather_widget.schemas import UnitSystem, WeatherReport


def build_current_html(report: WeatherReport, unit: UnitSystem) -> str:
    """Build HTML for the current-conditions card.

    The condition icon comes from today's daily weather code; humidity is
    today's mean, which also feeds the feels-like value.
    """
    today = report.today
    return render_template(
        "current.html.j2",
        date_label=long_date(today.date),
        condition=classify(today.weather_code),
        temperature=report.current.temperature,
        wind_speed=report.current.wind_speed,
        humidity=today.humidity_mean,
        feels_like=feels_like(report),
        symbol=unit_symbol(unit),
    )
