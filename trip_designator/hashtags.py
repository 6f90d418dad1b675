"""Memo hashtag extraction.

A hashtag is ``#`` followed by one or more ASCII letters, digits or
underscores. Tags are returned without the ``#``, in the order they appear,
duplicates included.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_HASHTAG_RE = re.compile(r"#([A-Za-z0-9_]+)")

TRIP_PREFIX = "trip"
HOUSEHOLD_TAG = "household"
TRANSFER_TAG = "transfer"


def extract_all_hashtags(memo: str | None) -> list[str]:
    if not memo:
        return []
    return _HASHTAG_RE.findall(memo)


def is_trip_hashtag(tag: str) -> bool:
    return tag.lower().startswith(TRIP_PREFIX)


def is_relevant_hashtag(tag: str) -> bool:
    """Trip-prefixed, or exactly ``household`` / ``transfer`` (case-insensitive)."""

    lower = tag.lower()
    return lower.startswith(TRIP_PREFIX) or lower in (HOUSEHOLD_TAG, TRANSFER_TAG)


def filter_relevant_hashtags(hashtags: Iterable[str]) -> list[str]:
    return [tag for tag in hashtags if is_relevant_hashtag(tag)]


def filter_trip_hashtags(hashtags: Iterable[str]) -> list[str]:
    return [tag for tag in hashtags if is_trip_hashtag(tag)]


def extract_hashtags(memo: str | None) -> list[str]:
    """Relevant hashtags of ``memo`` (see :func:`is_relevant_hashtag`)."""

    return filter_relevant_hashtags(extract_all_hashtags(memo))


def extract_trip_hashtags(memo: str | None) -> list[str]:
    return filter_trip_hashtags(extract_all_hashtags(memo))


__all__ = [
    "HOUSEHOLD_TAG",
    "TRANSFER_TAG",
    "TRIP_PREFIX",
    "extract_all_hashtags",
    "extract_hashtags",
    "extract_trip_hashtags",
    "filter_relevant_hashtags",
    "filter_trip_hashtags",
    "is_relevant_hashtag",
    "is_trip_hashtag",
]
