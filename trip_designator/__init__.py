"""Public interface for the ``trip_designator`` package.

This module exposes the pipeline entry points and the public models as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .api import classify_and_tag, cluster_trips, summarize_trips
from .clustering import (
    InclusionPredicate,
    group_transactions_by_consecutive_dates,
    include_in_trip,
    include_non_transfer_in_trip,
)
from .hashtags import extract_all_hashtags, extract_hashtags, filter_relevant_hashtags
from .heuristics import is_bill_transaction, is_transfer_transaction
from .logging_setup import configure_logging
from .models import (
    DEFAULT_SETTINGS,
    TaggedTransaction,
    Transaction,
    TripGroup,
    TripSettings,
    TripSummary,
    TripTransaction,
    ValidationError,
)
from .naming import TripName, generate_trip_name

__all__ = [
    # API
    "classify_and_tag",
    "cluster_trips",
    "summarize_trips",
    # Building blocks
    "extract_all_hashtags",
    "extract_hashtags",
    "filter_relevant_hashtags",
    "is_bill_transaction",
    "is_transfer_transaction",
    "group_transactions_by_consecutive_dates",
    "include_in_trip",
    "include_non_transfer_in_trip",
    "generate_trip_name",
    "configure_logging",
    # Models / types
    "DEFAULT_SETTINGS",
    "InclusionPredicate",
    "TaggedTransaction",
    "Transaction",
    "TripGroup",
    "TripName",
    "TripSettings",
    "TripSummary",
    "TripTransaction",
    "ValidationError",
]
