"""Full widget page: controls state, current card and forecast grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_widget.renderers import render_template
from weather_widget.renderers.current import build_current_html
from weather_widget.renderers.forecast import build_forecast_html
from weather_widget.renderers.weather_utils import unit_symbol

if TYPE_CHECKING:
    from weather_widget.session import WidgetContext


def build_widget_page(context: WidgetContext, title: str = "Weather Forecast") -> str:
    """Render the whole page for ``context``.

    Without a report the cards are left out; an error in the context is shown
    as a banner above whatever report is still current.
    """
    current_html = forecast_html = ""
    if context.report is not None:
        current_html = build_current_html(context.report, context.unit)
        forecast_html = build_forecast_html(context.report, context.unit)

    # The toggle button shows the unit you would switch to
    other_unit = context.unit.toggled()
    return render_template(
        "base.html.j2",
        title=title,
        context=context,
        unit_button=unit_symbol(other_unit),
        theme_button="\u2600\ufe0f" if context.dark_mode else "\U0001f319",
        current_html=current_html,
        forecast_html=forecast_html,
    )
