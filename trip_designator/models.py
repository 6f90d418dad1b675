"""Data models for ``trip_designator``.

Records flow strictly downstream and are never mutated in place:

``Transaction`` (validated input) → ``TaggedTransaction`` (memo tags and
flags) → ``TripTransaction`` (trip assignment) → ``TripSummary``.

All record models are frozen pydantic models. Ledger fields the package does
not interpret (``account_name``, ``cleared``, ...) are carried through as
extras. Derived fields use snake_case attributes and serialize under their
camelCase names via :meth:`to_record`, which is what host applications
consume.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .dates import resolve_timezone, to_civil_date

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ValidationError(ValueError):
    """Raised for the first invalid input record (or invalid settings).

    ``index`` is the record's position in the input batch and
    ``transaction_id`` its ``id`` when one could be read. The underlying
    pydantic error, when there is one, is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        transaction_id: Any = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.transaction_id = transaction_id


# ---------------------------------------------------------------------------
# Transaction records
# ---------------------------------------------------------------------------


class _Record(BaseModel):
    def to_record(self) -> dict[str, Any]:
        """Return a JSON-serializable dict keyed by the public (camelCase) names."""

        return self.model_dump(mode="json", by_alias=True)


class Transaction(_Record):
    """A single ledger transaction as supplied by the host application.

    ``date`` is the civil date in the reference timezone. Pass the zone in the
    validation context (``context={"timezone": ...}``) to override the
    deployment default; :mod:`trip_designator.validation` does this for every
    entry point.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str | None = None
    date: dt.date
    amount: int = Field(strict=True)
    memo: str | None = None
    payee_name: str | None = None
    category_name: str | None = None
    category_group_name: str | None = None
    source: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> Any:
        # Some ledgers export numeric ids.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("date", mode="before")
    @classmethod
    def _to_reference_date(cls, v: Any, info: ValidationInfo) -> dt.date:
        if isinstance(v, dt.date) and not isinstance(v, dt.datetime):
            return v
        tz = (info.context or {}).get("timezone")
        return to_civil_date(v, resolve_timezone(tz))


class TaggedTransaction(Transaction):
    """A transaction with memo hashtags extracted and automatic tags applied."""

    hashtags: tuple[str, ...] = ()
    relevant_hashtags: tuple[str, ...] = Field(default=(), alias="relevantHashtags")
    has_trip_tag: bool = Field(default=False, alias="hasTripTag")
    has_household_tag: bool = Field(default=False, alias="hasHouseholdTag")
    has_transfer_tag: bool = Field(default=False, alias="hasTransferTag")
    # Whether this pass appended the tag (false when it was already present).
    auto_tagged_as_bill: bool = Field(default=False, alias="autoTaggedAsBill")
    auto_tagged_as_transfer: bool = Field(default=False, alias="autoTaggedAsTransfer")


class TripTransaction(TaggedTransaction):
    """A tagged transaction annotated with its trip assignment.

    ``trip_name`` is ``None`` for transactions outside every trip.
    """

    trip_hashtags: tuple[str, ...] = Field(default=(), alias="tripHashtags")
    trip_name: str | None = Field(default=None, alias="tripName")
    is_auto_generated_trip: bool = Field(default=False, alias="isAutoGeneratedTrip")


# ---------------------------------------------------------------------------
# Trips
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TripGroup:
    """A contiguous, date-sorted run of transactions forming one trip.

    Groups always span at least two distinct dates; construction enforces it.
    """

    transactions: tuple[Transaction, ...]

    def __post_init__(self) -> None:
        if len({t.date for t in self.transactions}) < 2:
            raise ValueError("TripGroup requires transactions spanning at least 2 distinct dates")

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)

    @property
    def dates(self) -> tuple[dt.date, ...]:
        """Distinct dates in ascending order."""
        return tuple(sorted({t.date for t in self.transactions}))

    @property
    def start_date(self) -> dt.date:
        return min(t.date for t in self.transactions)

    @property
    def end_date(self) -> dt.date:
        return max(t.date for t in self.transactions)


class TripSummary(_Record):
    """Aggregate view of one named trip, computed fresh on every call."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str
    start_date: dt.date = Field(alias="startDate")
    end_date: dt.date = Field(alias="endDate")
    transaction_count: int = Field(alias="transactionCount")
    # Sum of outflows only (negative amounts); refunds and income are ignored.
    total_spending: int = Field(alias="totalSpending")
    frequent_words: tuple[str, ...] = Field(default=(), alias="frequentWords")


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TripSettings(_Record):
    """Trip detection settings.

    Attributes
    ----------
    max_days_between:
        Largest day gap between consecutive (date-sorted) transactions that
        still keeps them in the same trip. ``0`` only joins same-day
        transactions, so no multi-date trip can form.
    exclude_positive_transactions:
        Leave inflows (amount > 0) out of trip clustering.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    max_days_between: int = Field(default=2, ge=0, strict=True, alias="maxDaysBetween")
    exclude_positive_transactions: bool = Field(
        default=False, strict=True, alias="excludePositiveTransactions"
    )


DEFAULT_SETTINGS = TripSettings()


__all__ = [
    "DEFAULT_SETTINGS",
    "TaggedTransaction",
    "Transaction",
    "TripGroup",
    "TripSettings",
    "TripSummary",
    "TripTransaction",
    "ValidationError",
]
