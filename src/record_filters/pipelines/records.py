"""Named pipelines that classify records into animals and IDs."""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence

from ..config import AppConfig, load_config
from ..filters.base import BulkFilter, Record, RecordPredicate, RecordSequence, apply_bulk_filters, apply_filters
from ..filters.bulk_filters import deduplicate_records
from ..filters.record_filters import (
    only_ids,
    reject_integers,
    reject_long_records,
    reject_magical_creatures,
    reject_sentences,
)
from .base import Pipeline, PipelineContext, PipelineStep

LOGGER = logging.getLogger(__name__)

ANIMALS = "animals"
IDS = "ids"


class RecordPipeline(Pipeline):
    """Predicate filters followed by bulk filters over a record collection."""

    def __init__(
        self,
        *,
        name: str,
        predicates: Sequence[RecordPredicate],
        bulk_filters: Sequence[BulkFilter],
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(name=name, logger=logger or LOGGER)
        self.predicates = tuple(predicates)
        self.bulk_filters = tuple(bulk_filters)

        self.add_step(PipelineStep("apply-filters", self._apply_filters_step))
        self.add_step(PipelineStep("apply-bulk-filters", self._apply_bulk_filters_step))

    def __call__(self, records: RecordSequence) -> list[Record]:
        return self.run(records=records)["result"]

    def _apply_filters_step(self, context: PipelineContext) -> PipelineContext:
        records: RecordSequence = context.get("records", ())
        filtered = apply_filters(records, *self.predicates)
        self.logger.info(
            "[%s] %d of %d records kept by record filters",
            self.name,
            len(filtered),
            len(records),
        )
        context["filtered"] = filtered
        return context

    def _apply_bulk_filters_step(self, context: PipelineContext) -> PipelineContext:
        filtered: RecordSequence = context.get("filtered", [])
        result = apply_bulk_filters(filtered, *self.bulk_filters)
        self.logger.info(
            "[%s] %d of %d records kept by bulk filters",
            self.name,
            len(result),
            len(filtered),
        )
        context["result"] = result
        return context


def animal_pipeline(config: AppConfig | None = None) -> RecordPipeline:
    """Single-word, non-numeric, short, non-mythical records without repeats."""

    config = config or load_config()
    return RecordPipeline(
        name=ANIMALS,
        predicates=[
            reject_magical_creatures(config.magical_creatures),
            reject_long_records(config.max_record_length),
            reject_integers(),
            reject_sentences(),
        ],
        bulk_filters=[deduplicate_records()],
    )


def id_pipeline(config: AppConfig | None = None) -> RecordPipeline:
    """Two-segment hyphenated records with non-numeric segments, without repeats."""

    return RecordPipeline(
        name=IDS,
        predicates=[only_ids()],
        bulk_filters=[deduplicate_records()],
    )


def filter_for_animals(records: RecordSequence) -> list[Record]:
    return animal_pipeline()(records)


def filter_for_ids(records: RecordSequence) -> list[Record]:
    return id_pipeline()(records)


PIPELINES: Mapping[str, Callable[[AppConfig | None], RecordPipeline]] = {
    ANIMALS: animal_pipeline,
    IDS: id_pipeline,
}


def build_pipeline(name: str, config: AppConfig | None = None) -> RecordPipeline:
    """Look up the pipeline registered as ``name`` and build it for ``config``."""

    return PIPELINES[name](config)


__all__ = [
    "ANIMALS",
    "IDS",
    "PIPELINES",
    "RecordPipeline",
    "animal_pipeline",
    "build_pipeline",
    "filter_for_animals",
    "filter_for_ids",
    "id_pipeline",
]
