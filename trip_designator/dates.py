"""Reference-timezone resolution and civil-date helpers.

Every date the package compares, sorts or names is a ``datetime.date`` in a
single reference timezone. Conversion happens once, at ingestion
(:func:`to_civil_date`); everything downstream is plain date arithmetic.

The reference timezone defaults to ``America/Vancouver`` and can be set per
deployment through ``TRIP_DESIGNATOR_TIMEZONE``. Entry points also accept an
explicit ``timezone=`` argument, which wins over the environment.
"""

from __future__ import annotations

import os
from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE: str = "America/Vancouver"
_TIMEZONE_ENV = "TRIP_DESIGNATOR_TIMEZONE"

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def resolve_timezone(timezone: tzinfo | str | None = None) -> tzinfo:
    """Return the reference timezone.

    Precedence: explicit ``timezone`` argument, then the
    ``TRIP_DESIGNATOR_TIMEZONE`` environment variable, then
    :data:`DEFAULT_TIMEZONE`. Unknown IANA names raise
    ``zoneinfo.ZoneInfoNotFoundError``.
    """

    if isinstance(timezone, tzinfo):
        return timezone
    name = timezone or os.getenv(_TIMEZONE_ENV) or DEFAULT_TIMEZONE
    return ZoneInfo(name.strip())


def to_civil_date(value: object, tz: tzinfo) -> date:
    """Convert ``value`` to a calendar date in ``tz``.

    Accepts ``date``, ``datetime`` and ISO-8601 strings. Aware datetimes are
    converted into ``tz`` before the date is taken; naive datetimes and bare
    dates are already civil values in ``tz``. Raises ``ValueError`` for
    anything else, including empty strings.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(tz).date()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        s = value.strip()
        if not s:
            raise ValueError("date is empty")
        try:
            if len(s) == 10:
                return date.fromisoformat(s)
            return to_civil_date(datetime.fromisoformat(s), tz)
        except ValueError as exc:
            raise ValueError(f"invalid ISO date: {value!r}") from exc
    raise ValueError(f"unsupported date value: {value!r}")


def days_between(a: date, b: date) -> int:
    """Whole days between two civil dates, always non-negative."""

    return abs((a - b).days)


__all__ = [
    "DEFAULT_TIMEZONE",
    "MONTH_ABBREVIATIONS",
    "days_between",
    "resolve_timezone",
    "to_civil_date",
]
