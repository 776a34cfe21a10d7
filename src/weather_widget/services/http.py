"""
Shared HTTP client for the Open-Meteo and country-list services.

Provides a pre-configured ``requests.Session`` with a default timeout and
a retry adapter. Upstream calls are plain GETs; the default retry budget
comes from settings and is zero, so a failed request surfaces immediately
as ``UpstreamUnavailable``.

Usage::

    from weather_widget.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_widget import __version__
from weather_widget.config import get_settings
from weather_widget.errors import MalformedResponse, UpstreamUnavailable

logger = logging.getLogger(__name__)

USER_AGENT = f"weather-widget/{__version__}"

#: Retry strategy used when ``http_retries`` is raised above zero.
BACKOFF_FACTOR = 2  # 0s, 2s, 4s, ... between retries
RETRY_STATUSES = [429, 502, 503, 504]


def build_retry(total: int) -> Retry:
    """Retry strategy for safe methods only."""
    return Retry(
        total=total,
        backoff_factor=BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # let resp.raise_for_status() handle it
    )


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``http_retries`` from settings).
        timeout: Default timeout applied to every request (defaults to ``http_timeout``).
    """
    settings = get_settings()
    if retry is None:
        retry = build_retry(settings.http_retries)
    if timeout is None:
        timeout = settings.http_timeout

    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()


def get_json(url: str, params: dict[str, str | int | float] | None = None) -> object:
    """
    GET ``url`` through the shared session and decode the JSON body.

    Raises:
        UpstreamUnavailable: Connection error, timeout, or non-2xx status.
        MalformedResponse: The body is not valid JSON.
    """
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = session.get(url, params=params)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise UpstreamUnavailable(url, status_code=status, reason=str(exc)) from exc
    except requests.RequestException as exc:
        raise UpstreamUnavailable(url, reason=str(exc)) from exc

    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponse(url, "body is not valid JSON") from exc
