"""Automatic ``#household`` / ``#transfer`` tagging.

Bills get ``#household`` and cross-ledger transfers get ``#transfer``,
appended to the memo unless the literal tag is already there. Transfer
detection always looks at the batch as it was before tagging, so tagging one
transaction never changes the outcome for another.
"""

from __future__ import annotations

from collections.abc import Sequence

from .hashtags import (
    HOUSEHOLD_TAG,
    TRANSFER_TAG,
    extract_all_hashtags,
    filter_relevant_hashtags,
    is_trip_hashtag,
)
from .heuristics import TransferIndex, is_bill_transaction
from .logging_setup import get_logger
from .models import TaggedTransaction, Transaction

_logger = get_logger("trip_designator.tagging")

_HOUSEHOLD_MARK = f"#{HOUSEHOLD_TAG}"
_TRANSFER_MARK = f"#{TRANSFER_TAG}"


def _append_tag(memo: str, mark: str) -> str:
    return f"{memo} {mark}" if memo else mark


def add_automatic_tags(txn: Transaction, index: TransferIndex) -> TaggedTransaction:
    """Return a tagged copy of ``txn`` with automatic tags applied.

    The ``#household`` check runs before ``#transfer`` so a transaction that
    is both ends with ``... #household #transfer``. Presence checks look at the
    memo as supplied, case-sensitively.
    """

    existing = txn.memo or ""
    memo = existing

    tag_bill = is_bill_transaction(txn) and _HOUSEHOLD_MARK not in existing
    if tag_bill:
        memo = _append_tag(memo, _HOUSEHOLD_MARK)

    tag_transfer = index.is_transfer(txn) and _TRANSFER_MARK not in existing
    if tag_transfer:
        memo = _append_tag(memo, _TRANSFER_MARK)

    hashtags = extract_all_hashtags(memo)
    relevant = filter_relevant_hashtags(hashtags)
    lowered = [tag.lower() for tag in relevant]
    return TaggedTransaction.model_validate(
        {
            **txn.model_dump(),
            "memo": memo if memo != existing else txn.memo,
            "hashtags": tuple(hashtags),
            "relevant_hashtags": tuple(relevant),
            "has_trip_tag": any(is_trip_hashtag(tag) for tag in relevant),
            "has_household_tag": HOUSEHOLD_TAG in lowered,
            "has_transfer_tag": TRANSFER_TAG in lowered,
            "auto_tagged_as_bill": tag_bill,
            "auto_tagged_as_transfer": tag_transfer,
        }
    )


def tag_transactions(transactions: Sequence[Transaction]) -> list[TaggedTransaction]:
    """Tag every transaction of a validated batch, preserving input order."""

    index = TransferIndex(transactions)
    tagged = [add_automatic_tags(txn, index) for txn in transactions]
    _logger.info(
        "tag_transactions:done transactions=%d bills=%d transfers=%d",
        len(tagged),
        sum(1 for t in tagged if t.auto_tagged_as_bill),
        sum(1 for t in tagged if t.auto_tagged_as_transfer),
    )
    return tagged


__all__ = ["add_automatic_tags", "tag_transactions"]
