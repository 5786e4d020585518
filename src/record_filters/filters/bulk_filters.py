"""Filters that operate on whole record collections."""

from __future__ import annotations

from .base import BulkFilter, Record, RecordSequence


def deduplicate_records() -> BulkFilter:
    """Return a filter that drops repeated records, keeping first occurrences."""

    def deduplicate_records(records: RecordSequence, /) -> list[Record]:
        seen: set[Record] = set()
        result: list[Record] = []
        for record in records:
            if record in seen:
                continue
            seen.add(record)
            result.append(record)
        return result

    return deduplicate_records


__all__ = ["deduplicate_records"]
