"""Trip naming.

A trip carrying a user-supplied trip hashtag (``#tripHawaii``) is named after
the first such tag found in group order. Otherwise the name is generated from
the trip's earliest date as ``trip<YYYY><Mon><DD>``, e.g. ``trip2024Jan05``.
The generated name never encodes the end date, so two trips starting on the
same day share a name.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import NamedTuple

from .dates import MONTH_ABBREVIATIONS
from .hashtags import extract_trip_hashtags
from .models import Transaction


class TripName(NamedTuple):
    name: str
    is_manual: bool
    """True when taken from a trip hashtag rather than generated from a date."""


def find_manual_trip_tag(transactions: Iterable[Transaction]) -> str | None:
    for txn in transactions:
        tags = extract_trip_hashtags(txn.memo)
        if tags:
            return tags[0]
    return None


def format_auto_trip_name(start: date) -> str:
    return f"trip{start.year:04d}{MONTH_ABBREVIATIONS[start.month - 1]}{start.day:02d}"


def generate_trip_name(transactions: Iterable[Transaction]) -> TripName:
    """Name a trip group (or any non-empty run of transactions)."""

    txns = list(transactions)
    if not txns:
        raise ValueError("cannot name an empty trip")
    manual = find_manual_trip_tag(txns)
    if manual is not None:
        return TripName(manual, True)
    return TripName(format_auto_trip_name(min(t.date for t in txns)), False)


__all__ = [
    "TripName",
    "find_manual_trip_tag",
    "format_auto_trip_name",
    "generate_trip_name",
]
