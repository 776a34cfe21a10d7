"""Plain-text rendering of the widget, for the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_widget.analysis.feels_like import feels_like
from weather_widget.renderers.date_utils import long_date, short_date
from weather_widget.renderers.weather_utils import (
    classify,
    daily_average,
    format_number,
    format_tenths,
    unit_symbol,
)

if TYPE_CHECKING:
    from weather_widget.session import WidgetContext


def build_text_summary(context: WidgetContext) -> str:
    """Current conditions and the 7-day outlook as text lines."""
    lines = [f"{context.city}, {context.country} ({context.mode} data)"]
    report = context.report
    if report is None:
        lines.append("No weather report available.")
        return "\n".join(lines)

    sym = unit_symbol(context.unit)
    today = report.today
    lines += [
        f"{long_date(today.date)} - {classify(today.weather_code).label}",
        f"  Temperature: {format_number(report.current.temperature)}{sym}"
        f"  Feels like: {format_tenths(feels_like(report))}{sym}",
        f"  Wind: {format_number(report.current.wind_speed)} km/h"
        f"  Humidity: {format_number(today.humidity_mean)}%",
        "",
    ]
    for day in report.daily.days():
        line = (
            f"  {short_date(day.date):<20} {classify(day.weather_code).label:<14}"
            f" avg {format_number(daily_average(day.temp_max, day.temp_min))}{sym}"
            f"  H {format_number(day.temp_max)}{sym} / L {format_number(day.temp_min)}{sym}"
            f"  POP {format_number(day.precip_probability_mean)}%"
        )
        if day.precip_sum:
            line += f"  Rain {format_number(day.precip_sum)} mm"
        lines.append(line)
    return "\n".join(lines)
