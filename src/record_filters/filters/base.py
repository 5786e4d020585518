"""Core filter protocols and composers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

LOGGER = logging.getLogger(__name__)

Record = str
RecordSequence = Sequence[Record]


class RecordPredicate(Protocol):
    """Decides whether a single record is kept."""

    def __call__(self, record: Record, /) -> bool:
        ...


class BulkFilter(Protocol):
    """Transforms a whole record collection into a new one."""

    def __call__(self, records: RecordSequence, /) -> list[Record]:
        ...


def _filter_name(func: object) -> str:
    return getattr(func, "__name__", func.__class__.__name__)


def compose(*filters: BulkFilter) -> BulkFilter:
    """Compose ``filters`` into a single bulk filter applied left to right."""

    def _composed(records: RecordSequence, /) -> list[Record]:
        current = list(records)
        for func in filters:
            current = func(current)
        return current

    return _composed


def apply_filters(records: RecordSequence, *predicates: RecordPredicate) -> list[Record]:
    """Keep the records accepted by every predicate in ``predicates``.

    Predicates run in the given order and evaluation stops at the first one
    that rejects a record. Surviving records keep their input order. Without
    predicates the input comes back unchanged as a new list.
    """

    if not predicates:
        return list(records)

    kept: list[Record] = []
    for record in records:
        for predicate in predicates:
            if not predicate(record):
                LOGGER.debug("Record %r rejected by %s", record, _filter_name(predicate))
                break
        else:
            kept.append(record)
    return kept


def apply_bulk_filters(records: RecordSequence, *filters: BulkFilter) -> list[Record]:
    """Thread ``records`` through ``filters``, each consuming the previous output."""

    return compose(*filters)(records)


__all__ = [
    "BulkFilter",
    "Record",
    "RecordPredicate",
    "RecordSequence",
    "apply_bulk_filters",
    "apply_filters",
    "compose",
]
