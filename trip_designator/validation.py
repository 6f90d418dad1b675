"""Ingestion: turn caller-supplied records into validated models.

Validation happens once, at the edge, and fails fast on the first invalid
record. Downstream modules assume well-formed ``date`` and ``amount`` values
and never re-check them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import tzinfo
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .models import (
    Transaction,
    TripSettings,
    TripTransaction,
    ValidationError,
)

# Field names (and their camelCase aliases) the pipeline derives itself. They
# are dropped from raw input so every pass recomputes them from the memo.
_DERIVED_KEYS: frozenset[str] = frozenset(
    key
    for name, field in TripTransaction.model_fields.items()
    if name not in Transaction.model_fields
    for key in (name, field.alias)
    if key is not None
)


def _as_mapping(record: Any) -> Mapping[str, Any] | None:
    if isinstance(record, BaseModel):
        return record.model_dump()
    if isinstance(record, Mapping):
        return record
    return None


def _describe(exc: PydanticValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{loc}: {first.get('msg', 'invalid value')}"


M = TypeVar("M", bound=Transaction)


def _validate_one(
    model: type[M], idx: int, record: Any, tz: tzinfo, *, keep_derived: bool
) -> M:
    data = _as_mapping(record)
    if data is None:
        raise ValidationError(
            f"Invalid input: expected a mapping, got {type(record).__name__} for idx {idx}",
            index=idx,
        )
    tid = data.get("id")
    if not keep_derived:
        data = {k: v for k, v in data.items() if k not in _DERIVED_KEYS}
    try:
        return model.model_validate(data, context={"timezone": tz})
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Invalid input: {_describe(exc)} for idx {idx} (id={tid!r})",
            index=idx,
            transaction_id=tid,
        ) from exc


def ensure_valid_transactions(records: Iterable[Any], *, tz: tzinfo) -> list[Transaction]:
    """Validate raw records into :class:`Transaction` models, in input order.

    Derived keys (``hashtags``, ``tripName``, ...) on the input are ignored.
    Raises :class:`~trip_designator.models.ValidationError` on the first
    invalid record.
    """

    return [
        _validate_one(Transaction, idx, record, tz, keep_derived=False)
        for idx, record in enumerate(records)
    ]


def ensure_valid_trip_transactions(
    records: Iterable[Any], *, tz: tzinfo
) -> list[TripTransaction]:
    """Validate already-annotated records, keeping their trip assignment."""

    return [
        _validate_one(TripTransaction, idx, record, tz, keep_derived=True)
        for idx, record in enumerate(records)
    ]


def ensure_valid_settings(settings: TripSettings | Mapping[str, Any] | None) -> TripSettings:
    """Coerce ``settings`` into :class:`TripSettings` (``None`` → defaults)."""

    if settings is None:
        return TripSettings()
    if isinstance(settings, TripSettings):
        return settings
    try:
        return TripSettings.model_validate(settings)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid settings: {_describe(exc)}") from exc


__all__ = [
    "ensure_valid_settings",
    "ensure_valid_transactions",
    "ensure_valid_trip_transactions",
]
