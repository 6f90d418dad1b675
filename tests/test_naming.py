import pytest

from trip_designator.models import Transaction
from trip_designator.naming import TripName, format_auto_trip_name, generate_trip_name


def _txns(*days: str, memos: tuple[str, ...] = ()) -> list[Transaction]:
    memos = memos or ("",) * len(days)
    return [
        Transaction.model_validate({"id": str(i), "date": d, "amount": -100, "memo": m})
        for i, (d, m) in enumerate(zip(days, memos, strict=True))
    ]


def test_single_day_name_uses_start_date():
    assert generate_trip_name(_txns("2024-01-13", "2024-01-13")) == TripName("trip2024Jan13", False)


def test_multi_day_name_encodes_start_only():
    assert generate_trip_name(_txns("2024-01-13", "2024-01-16")).name == "trip2024Jan13"


def test_cross_month_name_encodes_start_only():
    assert generate_trip_name(_txns("2024-01-26", "2024-02-02")).name == "trip2024Jan26"


def test_cross_year_name_encodes_start_only():
    assert generate_trip_name(_txns("2023-12-30", "2024-01-05")).name == "trip2023Dec30"


def test_day_is_zero_padded():
    assert generate_trip_name(_txns("2024-03-05", "2024-03-06")).name == "trip2024Mar05"


def test_manual_tag_wins():
    txns = _txns("2024-01-15", "2024-01-16", memos=("Hotel", "Dinner #tripHawaii"))
    assert generate_trip_name(txns) == TripName("tripHawaii", True)


def test_first_manual_tag_in_group_order_is_used():
    txns = _txns(
        "2024-01-15",
        "2024-01-16",
        "2024-01-17",
        memos=("#food", "#TRIPMaui #tripOahu", "#tripKauai"),
    )
    assert generate_trip_name(txns).name == "TRIPMaui"


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        ("2024-01-01", "trip2024Jan01"),
        ("2025-12-31", "trip2025Dec31"),
        ("2024-09-10", "trip2024Sep10"),
    ],
)
def test_auto_name_format(day, expected):
    [txn] = _txns(day)
    assert format_auto_trip_name(txn.date) == expected


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        generate_trip_name([])
