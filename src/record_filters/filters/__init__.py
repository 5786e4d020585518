"""Record predicates, bulk filters and their composers."""

from .base import BulkFilter, RecordPredicate, apply_bulk_filters, apply_filters, compose
from .bulk_filters import deduplicate_records
from .record_filters import (
    only_ids,
    parses_as_int,
    reject_integers,
    reject_long_records,
    reject_magical_creatures,
    reject_sentences,
)

__all__ = [
    "BulkFilter",
    "RecordPredicate",
    "apply_bulk_filters",
    "apply_filters",
    "compose",
    "deduplicate_records",
    "only_ids",
    "parses_as_int",
    "reject_integers",
    "reject_long_records",
    "reject_magical_creatures",
    "reject_sentences",
]
