"""Composable record filters for classifying string records."""

from .config import AppConfig, load_config
from .pipelines import build_pipeline, filter_for_animals, filter_for_ids

__all__ = ["AppConfig", "build_pipeline", "filter_for_animals", "filter_for_ids", "load_config"]
