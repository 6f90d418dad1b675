"""Bill and transfer heuristics.

Bills are recognized by category text. Transfers are recognized by a
matching counterpart in another ledger: a different transaction from a
different ``source`` with the same absolute amount, dated at most
:data:`TRANSFER_WINDOW_DAYS` days apart.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from .dates import days_between
from .models import Transaction

TRANSFER_WINDOW_DAYS: int = 3


def is_bill_transaction(txn: Transaction) -> bool:
    category = (txn.category_name or "").lower()
    group = (txn.category_group_name or "").lower()
    return "bill" in category or "bill" in group


def _is_counterpart(txn: Transaction, other: Transaction) -> bool:
    if other.id == txn.id:
        return False
    if other.source == txn.source:
        return False
    if abs(other.amount) != abs(txn.amount):
        return False
    return days_between(txn.date, other.date) <= TRANSFER_WINDOW_DAYS


def is_transfer_transaction(txn: Transaction, candidates: Iterable[Transaction] = ()) -> bool:
    """Return True when ``candidates`` holds a cross-ledger counterpart of ``txn``.

    An empty candidate collection means no cross-ledger data is available and
    always yields False.
    """

    return any(_is_counterpart(txn, other) for other in candidates)


class TransferIndex:
    """Absolute-amount index over a batch for repeated transfer lookups.

    Answers exactly what :func:`is_transfer_transaction` answers against the
    same batch, without scanning every transaction per lookup.
    """

    __slots__ = ("_by_amount",)

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        self._by_amount: dict[int, list[Transaction]] = defaultdict(list)
        for txn in transactions:
            self._by_amount[abs(txn.amount)].append(txn)

    def is_transfer(self, txn: Transaction) -> bool:
        return is_transfer_transaction(txn, self._by_amount.get(abs(txn.amount), ()))


__all__ = [
    "TRANSFER_WINDOW_DAYS",
    "TransferIndex",
    "is_bill_transaction",
    "is_transfer_transaction",
]
