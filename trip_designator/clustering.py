"""Date-proximity clustering of transactions into trip groups.

Transactions are sorted by ``(date, id)`` and walked once. Each transaction
joins the current group when it is at most ``max_days_between`` days after
the transaction immediately before it; otherwise the current group is closed
and a new one starts. Closed groups are kept only when they span at least
two distinct dates. Single-date groups are dropped, never merged into a
neighbour.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeAlias, TypeVar

from .dates import days_between
from .heuristics import is_bill_transaction
from .logging_setup import get_logger
from .models import DEFAULT_SETTINGS, TaggedTransaction, Transaction, TripGroup, TripSettings

_logger = get_logger("trip_designator.clustering")

InclusionPredicate: TypeAlias = Callable[[TaggedTransaction, TripSettings], bool]
"""Decides whether a tagged transaction takes part in trip clustering."""


# ---------------------------------------------------------------------------
# Inclusion predicates
# ---------------------------------------------------------------------------


def include_in_trip(txn: TaggedTransaction, settings: TripSettings = DEFAULT_SETTINGS) -> bool:
    """Default predicate: skip bills, and inflows when configured to."""

    if settings.exclude_positive_transactions and txn.amount > 0:
        return False
    return not is_bill_transaction(txn)


def include_non_transfer_in_trip(
    txn: TaggedTransaction, settings: TripSettings = DEFAULT_SETTINGS
) -> bool:
    """Stricter predicate that also skips anything tagged as a transfer."""

    if not include_in_trip(txn, settings):
        return False
    if txn.has_transfer_tag:
        return False
    return "#transfer" not in (txn.memo or "").lower()


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


T = TypeVar("T", bound=Transaction)


def sort_transactions(transactions: Iterable[T]) -> list[T]:
    """Stable sort by date, then by ``id`` (missing ids sort as ``""``)."""

    return sorted(transactions, key=lambda t: (t.date, t.id or ""))


def _qualifies(group: Sequence[Transaction]) -> bool:
    return len({t.date for t in group}) >= 2


def group_transactions_by_consecutive_dates(
    transactions: Iterable[Transaction], max_days_between: int = 0
) -> list[TripGroup]:
    """Split ``transactions`` into qualifying trip groups in ascending date order.

    The gap is always measured against the immediately preceding transaction
    in sort order, not the first transaction of the group.
    """

    if max_days_between < 0:
        raise ValueError(f"max_days_between must be non-negative, got {max_days_between}")

    ordered = sort_transactions(transactions)
    groups: list[TripGroup] = []
    current: list[Transaction] = []
    dropped = 0

    def _close() -> None:
        nonlocal dropped
        if _qualifies(current):
            groups.append(TripGroup(tuple(current)))
        elif current:
            dropped += 1

    for txn in ordered:
        if current and days_between(txn.date, current[-1].date) > max_days_between:
            _close()
            current = []
        current.append(txn)
    _close()

    _logger.debug(
        "group_transactions:done transactions=%d groups=%d dropped=%d max_days_between=%d",
        len(ordered),
        len(groups),
        dropped,
        max_days_between,
    )
    return groups


__all__ = [
    "InclusionPredicate",
    "group_transactions_by_consecutive_dates",
    "include_in_trip",
    "include_non_transfer_in_trip",
    "sort_transactions",
]
