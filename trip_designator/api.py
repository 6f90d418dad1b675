"""Public entry points for ``trip_designator``.

The three functions here are the whole surface a host application needs:

- :func:`classify_and_tag`: validate a batch and apply automatic tags.
- :func:`cluster_trips`: tag, cluster and name trips; annotate every record.
- :func:`summarize_trips`: aggregate annotated records per trip.

Each call validates its input up front, works on its own copies and returns
new records. Inputs may be plain mappings (e.g. decoded ledger JSON) or this
package's models, and are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import tzinfo
from typing import Any

from .clustering import (
    InclusionPredicate,
    group_transactions_by_consecutive_dates,
    include_in_trip,
)
from .dates import resolve_timezone
from .hashtags import filter_trip_hashtags
from .logging_setup import get_logger
from .models import TaggedTransaction, TripSettings, TripSummary, TripTransaction
from .naming import TripName, generate_trip_name
from .summaries import get_trip_summaries
from .tagging import tag_transactions
from .validation import (
    ensure_valid_settings,
    ensure_valid_transactions,
    ensure_valid_trip_transactions,
)

_logger = get_logger("trip_designator.api")


def classify_and_tag(
    transactions: Iterable[Any], *, timezone: tzinfo | str | None = None
) -> list[TaggedTransaction]:
    """Validate ``transactions`` and apply automatic ``#household``/``#transfer`` tags.

    Returns one :class:`TaggedTransaction` per input record, in input order,
    with hashtag fields derived from the (possibly extended) memo. Any derived
    fields already present on the input are recomputed, so running the result
    through again adds no further tags.
    """

    tz = resolve_timezone(timezone)
    return tag_transactions(ensure_valid_transactions(transactions, tz=tz))


def cluster_trips(
    transactions: Iterable[Any],
    settings: TripSettings | Mapping[str, Any] | None = None,
    *,
    include: InclusionPredicate | None = None,
    timezone: tzinfo | str | None = None,
) -> list[TripTransaction]:
    """Run the full pipeline and annotate every transaction with its trip.

    Steps: tag the batch, keep the transactions accepted by ``include``
    (default :func:`~trip_designator.clustering.include_in_trip`), cluster
    them by date proximity, name each group, then annotate all input
    transactions, included or not.

    A transaction's own trip hashtag always wins over its group's name.
    ``is_auto_generated_trip`` is true only for transactions without their
    own trip hashtag that were placed in a group, whatever the group's
    name. Transactions in no group and without a trip hashtag get
    ``trip_name=None``.
    """

    resolved = ensure_valid_settings(settings)
    predicate = include or include_in_trip
    tagged = classify_and_tag(transactions, timezone=timezone)

    included = [t for t in tagged if predicate(t, resolved)]
    groups = group_transactions_by_consecutive_dates(included, resolved.max_days_between)

    # Keyed by object identity: ids are optional and may repeat across ledgers.
    assignments: dict[int, TripName] = {}
    for group in groups:
        trip = generate_trip_name(group)
        _logger.debug(
            "cluster_trips:group name=%s manual=%s transactions=%d start=%s end=%s",
            trip.name,
            trip.is_manual,
            len(group),
            group.start_date.isoformat(),
            group.end_date.isoformat(),
        )
        for txn in group:
            assignments[id(txn)] = trip

    annotated: list[TripTransaction] = []
    for txn in tagged:
        trip_tags = filter_trip_hashtags(txn.hashtags)
        manual = trip_tags[0] if trip_tags else None
        assigned = assignments.get(id(txn))
        annotated.append(
            TripTransaction.model_validate(
                {
                    **txn.model_dump(),
                    "trip_hashtags": tuple(trip_tags),
                    "trip_name": manual or (assigned.name if assigned else None),
                    "is_auto_generated_trip": manual is None and assigned is not None,
                }
            )
        )

    _logger.info(
        "cluster_trips:done transactions=%d included=%d groups=%d max_days_between=%d",
        len(tagged),
        len(included),
        len(groups),
        resolved.max_days_between,
    )
    return annotated


def summarize_trips(
    transactions: Iterable[Any], *, timezone: tzinfo | str | None = None
) -> list[TripSummary]:
    """Summarize trips over annotated transactions (output of :func:`cluster_trips`).

    Every transaction with a trip name counts, including ones that were
    excluded from clustering but carry a manual trip hashtag.
    """

    tz = resolve_timezone(timezone)
    summaries = get_trip_summaries(ensure_valid_trip_transactions(transactions, tz=tz))
    _logger.info("summarize_trips:done trips=%d", len(summaries))
    return summaries


__all__ = ["classify_and_tag", "cluster_trips", "summarize_trips"]
