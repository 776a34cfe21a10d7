"""
Prefect flow for building the static widget page.

Resolves the configured city, fetches (or mocks) its report, renders the
widget and writes ``site/index.html``.

Run locally:
    python -m weather_widget.flows.build

Run with Prefect dashboard:
    prefect server start &
    python -m weather_widget.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_widget.config import get_settings
from weather_widget.renderers.page import build_widget_page
from weather_widget.schemas import DataMode, UnitSystem
from weather_widget.session import SelectCity, WidgetContext, WidgetSession


@task(name="load-widget")
def load_widget(mode: DataMode, unit: UnitSystem, city: str | None = None) -> WidgetContext:
    """Load locations for ``mode`` and fetch the report for ``city`` (or the default)."""
    settings = get_settings()
    session = WidgetSession.from_settings(settings)
    context = session.start(WidgetContext(mode=mode, unit=unit))
    if city is not None and city != context.city:
        context = session.handle(context, SelectCity(city))
    return context


@task(name="render-widget")
def render_widget(context: WidgetContext) -> str:
    """Render the full widget page."""
    return build_widget_page(context)


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write the page to ``site_dir/index.html``."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    output_path.write_text(html, encoding="utf-8")
    return output_path


@flow(name="build-widget", log_prints=True)
def build_widget(
    city: str | None = None,
    mode: DataMode | None = None,
    unit: UnitSystem | None = None,
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """Main flow: load the widget state, render it, write the site."""
    settings = get_settings()
    mode = mode or settings.data_source
    unit = unit or settings.unit
    site_dir = site_dir or settings.site_dir

    print(f"Loading {mode} weather ({unit})...")
    context = load_widget(mode, unit, city)
    if context.error:
        print(f"Warning: {context.error}")
    if context.report is None:
        print("No weather report available. Building page without forecast.")

    print("Building HTML...")
    html = render_widget(context)

    print("Writing site...")
    output_path = write_site(html, site_dir)
    print(f"Site built: {output_path}")

    result = {
        "city": context.city,
        "country": context.country,
        "mode": str(mode),
        "unit": str(unit),
        "has_report": context.report is not None,
        "error": context.error,
        "output": str(output_path),
    }
    print(f"Flow complete: {result}")
    return result


if __name__ == "__main__":
    build_widget()
