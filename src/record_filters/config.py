"""Configuration helpers for record-filters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

MAGICAL_CREATURES: frozenset[str] = frozenset({"Unicorn", "Dragon", "Griffin", "Minotaur"})
MAX_RECORD_LENGTH = 75

DEFAULT_RECORDS: tuple[str, ...] = (
    "Cat",
    "A sentence is not a valid record.",
    "Minotaur",
    "cd5169bf-3649-4091-862b-c7ec1de92fd9-cd5169bf-3649-4091-862b-c7ec1de92fd9-cd5169bf-3649-4091-862b-c7ec1de92fd9",
    "3412-3241",
    "Dragon",
    "Cat",
)


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Fixed inputs and thresholds for a filtering run."""

    records: tuple[str, ...] = DEFAULT_RECORDS
    magical_creatures: frozenset[str] = field(default=MAGICAL_CREATURES)
    max_record_length: int = MAX_RECORD_LENGTH


def load_config(overrides: Mapping[str, Any] | None = None) -> AppConfig:
    """Build an :class:`AppConfig` from the defaults and ``overrides``.

    Only the known fields are read from ``overrides``; unknown keys are ignored.
    Sequences are frozen so the resulting configuration cannot be mutated
    between pipeline runs.
    """

    if overrides is None:
        overrides = {}
    records = tuple(str(record) for record in overrides.get("records", DEFAULT_RECORDS))
    creatures = frozenset(str(name) for name in overrides.get("magical_creatures", MAGICAL_CREATURES))
    max_length = int(overrides.get("max_record_length", MAX_RECORD_LENGTH))
    if max_length < 0:
        raise ValueError(f"max_record_length must not be negative: {max_length}")
    return AppConfig(records=records, magical_creatures=creatures, max_record_length=max_length)


__all__ = ["AppConfig", "DEFAULT_RECORDS", "MAGICAL_CREATURES", "MAX_RECORD_LENGTH", "load_config"]
