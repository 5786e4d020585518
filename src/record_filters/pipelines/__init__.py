"""Pipeline utilities for record-filters."""

from .base import Pipeline, PipelineContext, PipelineStep
from .records import PIPELINES, RecordPipeline, build_pipeline, filter_for_animals, filter_for_ids

__all__ = [
    "PIPELINES",
    "Pipeline",
    "PipelineContext",
    "PipelineStep",
    "RecordPipeline",
    "build_pipeline",
    "filter_for_animals",
    "filter_for_ids",
]
