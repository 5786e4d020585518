"""Per-record predicates used to classify string records."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..config import MAGICAL_CREATURES, MAX_RECORD_LENGTH
from .base import Record, RecordPredicate

ID_DELIMITER = "-"
WORD_DELIMITER = " "

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def parses_as_int(value: str) -> bool:
    """Return ``True`` when ``value`` is a strict base-10 integer.

    Only an optional sign followed by ASCII digits counts; whitespace and
    underscores are not accepted and the value must fit in a signed 64-bit
    integer.
    """

    if _INT_PATTERN.fullmatch(value) is None:
        return False
    return _INT_MIN <= int(value) <= _INT_MAX


def reject_magical_creatures(creatures: Iterable[str] = MAGICAL_CREATURES) -> RecordPredicate:
    """Return a predicate that drops exact matches of mythical creature names."""

    names = frozenset(creatures)

    def reject_magical_creatures(record: Record, /) -> bool:
        return record not in names

    return reject_magical_creatures


def reject_long_records(max_length: int = MAX_RECORD_LENGTH) -> RecordPredicate:
    """Return a predicate that drops records longer than ``max_length`` characters."""

    def reject_long_records(record: Record, /) -> bool:
        return len(record) <= max_length

    return reject_long_records


def reject_integers() -> RecordPredicate:
    """Return a predicate that drops integers disguised as strings."""

    def reject_integers(record: Record, /) -> bool:
        return not parses_as_int(record)

    return reject_integers


def reject_sentences() -> RecordPredicate:
    """Return a predicate that drops records containing spaces."""

    def reject_sentences(record: Record, /) -> bool:
        return len(record.split(WORD_DELIMITER)) == 1

    return reject_sentences


def only_ids() -> RecordPredicate:
    """Return a predicate that keeps two-part, hyphenated, non-numeric IDs.

    ``"ab-cd"`` is kept; ``"3412-3241"`` and ``"a-b-c"`` are not.
    """

    def only_ids(record: Record, /) -> bool:
        segments = record.split(ID_DELIMITER)
        if len(segments) != 2:
            return False
        return not any(parses_as_int(segment) for segment in segments)

    return only_ids


__all__ = [
    "ID_DELIMITER",
    "WORD_DELIMITER",
    "only_ids",
    "parses_as_int",
    "reject_integers",
    "reject_long_records",
    "reject_magical_creatures",
    "reject_sentences",
]
