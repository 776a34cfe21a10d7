"""Derived metrics computed from a ``WeatherReport``.

Pure functions, no I/O:
  - feels_like: compute_feels_like, feels_like
"""

from weather_widget.analysis.feels_like import compute_feels_like, feels_like

__all__ = ["compute_feels_like", "feels_like"]
