"""7-day forecast grid."""

from __future__ import annotations

from weather_widget.renderers import render_template
from weather_widget.renderers.date_utils import short_date
from weather_widget.renderers.weather_utils import classify, daily_average, unit_symbol
from weather_widget.schemas import UnitSystem, WeatherReport


def build_forecast_html(report: WeatherReport, unit: UnitSystem) -> str:
    """Build HTML for one card per forecast day."""
    cards = [
        {
            "date_label": short_date(day.date),
            "condition": classify(day.weather_code),
            "average": daily_average(day.temp_max, day.temp_min),
            "day": day,
        }
        for day in report.daily.days()
    ]
    return render_template("forecast.html.j2", cards=cards, symbol=unit_symbol(unit))
