from datetime import date

import pytest

from trip_designator.heuristics import (
    TransferIndex,
    is_bill_transaction,
    is_transfer_transaction,
)
from trip_designator.models import Transaction


def _txn(tid: str | None, day: str, amount: int = -20000, **extra) -> Transaction:
    return Transaction.model_validate({"id": tid, "date": day, "amount": amount, **extra})


# ---- Bills -------------------------------------------------------------------


@pytest.mark.parametrize(
    "fields",
    [
        {"category_name": "Bills"},
        {"category_name": "Electric BILL"},
        {"category_group_name": "Monthly bills"},
        {"category_group_name": "BILLS", "category_name": "Hydro"},
        {"category_name": "billiards"},
    ],
)
def test_bill_detection_matches_either_category_field(fields):
    assert is_bill_transaction(_txn("1", "2024-01-15", **fields)) is True


def test_bill_detection_is_symmetric_over_category_fields():
    a = _txn("1", "2024-01-15", category_name="Utility Bill", category_group_name="Home")
    b = _txn("2", "2024-01-15", category_name="Home", category_group_name="Utility Bill")
    assert is_bill_transaction(a) is is_bill_transaction(b) is True


def test_missing_categories_are_not_bills():
    assert is_bill_transaction(_txn("1", "2024-01-15")) is False
    assert is_bill_transaction(_txn("1", "2024-01-15", category_name="Groceries")) is False


# ---- Transfers ---------------------------------------------------------------


def test_transfer_between_ledgers_within_window():
    a = _txn("a", "2024-01-15", -20000, source="left")
    b = _txn("b", "2024-01-16", 20000, source="right")
    assert is_transfer_transaction(a, [a, b]) is True
    assert is_transfer_transaction(b, [a, b]) is True


def test_empty_candidates_never_match():
    a = _txn("a", "2024-01-15", source="left")
    assert is_transfer_transaction(a, []) is False
    assert is_transfer_transaction(a) is False


def test_same_source_or_same_id_never_matches():
    a = _txn("a", "2024-01-15", source="left")
    same_source = _txn("b", "2024-01-15", source="left")
    same_id = _txn("a", "2024-01-15", source="right")
    assert is_transfer_transaction(a, [a, same_source, same_id]) is False


def test_window_is_three_days_inclusive():
    a = _txn("a", "2024-01-15", source="left")
    assert is_transfer_transaction(a, [_txn("b", "2024-01-18", source="right")]) is True
    assert is_transfer_transaction(a, [_txn("b", "2024-01-12", source="right")]) is True
    assert is_transfer_transaction(a, [_txn("b", "2024-01-19", source="right")]) is False


def test_amounts_must_match_exactly_in_absolute_value():
    a = _txn("a", "2024-01-15", -20000, source="left")
    assert is_transfer_transaction(a, [_txn("b", "2024-01-15", 20001, source="right")]) is False
    assert is_transfer_transaction(a, [_txn("b", "2024-01-15", -20000, source="right")]) is True


def test_index_agrees_with_pairwise_scan():
    batch = [
        _txn("a", "2024-01-15", -20000, source="left"),
        _txn("b", "2024-01-17", 20000, source="right"),
        _txn("c", "2024-01-15", -5000, source="left"),
        _txn("d", "2024-01-25", 5000, source="right"),
        _txn("e", "2024-01-15", -5000, source="left"),
        _txn(None, "2024-01-16", 700, source="right"),
        _txn(None, "2024-01-16", -700, source="left"),
    ]
    index = TransferIndex(batch)
    for txn in batch:
        assert index.is_transfer(txn) is is_transfer_transaction(txn, batch)
    assert [index.is_transfer(t) for t in batch] == [True, True, False, False, False, False, False]


def test_dates_are_compared_as_civil_dates():
    a = _txn("a", date(2024, 1, 15), source="left")
    b = _txn("b", "2024-01-18T23:30:00-08:00", source="right")
    assert b.date == date(2024, 1, 18)
    assert is_transfer_transaction(a, [b]) is True
