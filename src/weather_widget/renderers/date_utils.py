"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import date  # noqa: TC003


def long_date(day: date) -> str:
    """e.g. ``Monday, October 19, 2026``."""
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"


def short_date(day: date) -> str:
    """e.g. ``Mon, October 19``."""
    return f"{day.strftime('%a')}, {day.strftime('%B')} {day.day}"
