"""Per-trip summaries: date range, count, spending and frequent words."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from .models import TripSummary, TripTransaction

# Letters only, at least four of them, bounded by ASCII word boundaries.
_WORD_RE = re.compile(r"\b[a-z]{4,}\b", re.ASCII)

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        "from", "up", "about", "into", "through", "during", "before", "after", "above",
        "below", "between", "among", "a", "an", "as", "are", "was", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "must", "can", "is", "am", "it", "this", "that",
        "these", "those", "i", "you", "he", "she", "we", "they", "me", "him", "her",
        "us", "them", "my", "your", "his", "its", "our", "their", "inc", "llc", "ltd",
        "corp", "co", "company", "store", "shop", "market", "center", "centre",
    }
)  # fmt: skip


def most_frequent_words(transactions: Iterable[TripTransaction], top_count: int = 3) -> list[str]:
    """Most frequent payee/memo words, ties kept in first-seen order."""

    counts: Counter[str] = Counter()
    for txn in transactions:
        text = f"{txn.payee_name or ''} {txn.memo or ''}".lower()
        counts.update(w for w in _WORD_RE.findall(text) if w not in STOP_WORDS)
    # most_common() keeps insertion order among equal counts.
    return [word for word, _ in counts.most_common(top_count)]


def summarize_trip(name: str, transactions: Sequence[TripTransaction]) -> TripSummary:
    dates = [t.date for t in transactions]
    return TripSummary(
        name=name,
        start_date=min(dates),
        end_date=max(dates),
        transaction_count=len(transactions),
        total_spending=sum(t.amount for t in transactions if t.amount < 0),
        frequent_words=tuple(most_frequent_words(transactions, 3)),
    )


def get_trip_summaries(transactions: Iterable[TripTransaction]) -> list[TripSummary]:
    """Summarize every named trip, in order of first appearance.

    Transactions without a ``trip_name`` are ignored.
    """

    by_trip: dict[str, list[TripTransaction]] = {}
    for txn in transactions:
        if txn.trip_name:
            by_trip.setdefault(txn.trip_name, []).append(txn)
    return [summarize_trip(name, members) for name, members in by_trip.items()]


__all__ = [
    "STOP_WORDS",
    "get_trip_summaries",
    "most_frequent_words",
    "summarize_trip",
]
