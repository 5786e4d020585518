from __future__ import annotations

import dataclasses

import pytest

from record_filters.config import DEFAULT_RECORDS, MAGICAL_CREATURES, MAX_RECORD_LENGTH, load_config


def test_load_config_defaults() -> None:
    config = load_config()
    assert config.records == DEFAULT_RECORDS
    assert len(config.records) == 7
    assert config.magical_creatures == MAGICAL_CREATURES
    assert config.max_record_length == MAX_RECORD_LENGTH == 75


def test_load_config_overrides_are_frozen() -> None:
    config = load_config({"records": ["a", "b"], "magical_creatures": ["Cat"], "unknown": 1})
    assert config.records == ("a", "b")
    assert config.magical_creatures == frozenset({"Cat"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.records = ()  # type: ignore[misc]


def test_load_config_rejects_negative_length() -> None:
    with pytest.raises(ValueError, match="must not be negative"):
        load_config({"max_record_length": -1})
