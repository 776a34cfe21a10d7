"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: ``WeatherReport`` / ``WidgetContext`` plus the active ``UnitSystem``
  - Output: str (HTML fragment, or a full page for ``page``)
  - No side effects, no I/O

Public API:
  - current: build_current_html
  - forecast: build_forecast_html
  - page: build_widget_page
  - weather_utils: classify, unit_symbol, Condition

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``.
   Fragments have no <html>/<body> tags; CSS lives in ``base.html.j2``.
3. Add tests asserting the returned HTML contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from weather_widget.renderers.weather_utils import format_number, format_tenths

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)
_jinja_env.filters["num"] = format_number
_jinja_env.filters["tenths"] = format_tenths


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
