"""Parsing of `start`/`end` query values for the reporting endpoints."""

from __future__ import annotations

from datetime import UTC, date, datetime, time


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_bound(raw: str, *, end_of_day: bool = False) -> datetime:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime.

    A bare date expands to the first instant of that day, or to the last one when
    `end_of_day` is set, so `end=2020-08-17` still covers payments made that evening.
    Naive datetimes are read as UTC.
    """

    value = raw.strip()
    if not value:
        raise ValueError("Date bound must not be empty.")

    try:
        day = date.fromisoformat(value)
    except ValueError:
        day = None
    if day is not None:
        return datetime.combine(day, time.max if end_of_day else time.min, tzinfo=UTC)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO-8601 date or datetime: {raw!r}") from exc
    return _as_utc(parsed)


def parse_window(start: str, end: str) -> tuple[datetime, datetime]:
    """Return the inclusive `[start, end]` window; order is not checked here."""

    return parse_bound(start), parse_bound(end, end_of_day=True)
