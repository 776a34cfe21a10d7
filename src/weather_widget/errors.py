"""Errors reported by the data layer.

All three concrete errors are recoverable: the session records them and
keeps showing the previous report. Mock mode never raises any of them.
"""

from __future__ import annotations


class WeatherWidgetError(RuntimeError):
    """Base class for failures the widget reports to the user."""


class NoMatchFound(WeatherWidgetError):
    """Geocoding returned no results for a city name."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"No location found for {query!r}")


class UpstreamUnavailable(WeatherWidgetError):
    """Network failure or non-2xx response from an external service."""

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None) -> None:
        self.url = url
        self.status_code = status_code
        message = f"Upstream request failed url={url}"
        if status_code is not None:
            message = f"{message} status={status_code}"
        if reason:
            message = f"{message} reason={reason}"
        super().__init__(message)


class MalformedResponse(WeatherWidgetError):
    """Upstream payload is missing expected fields or has the wrong shape."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Malformed response from {source}: {detail}")
