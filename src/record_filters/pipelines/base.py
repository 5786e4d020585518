"""Simple pipeline implementation for composing record operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, MutableMapping

PipelineContext = MutableMapping[str, Any]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PipelineStep:
    name: str
    func: Callable[[PipelineContext], PipelineContext]


class Pipeline:
    """Base pipeline class composed of ordered steps."""

    def __init__(self, *, name: str, logger: logging.Logger | None = None) -> None:
        self.name = name
        self.steps: list[PipelineStep] = []
        self.logger = logger or LOGGER

    def add_step(self, step: PipelineStep) -> None:
        self.steps.append(step)

    def run(self, **kwargs: Any) -> PipelineContext:
        context: PipelineContext = dict(kwargs)
        self.logger.debug("Starting pipeline %s with context keys: %s", self.name, list(context))
        for step in self.steps:
            self.logger.debug("[%s] Running step %s", self.name, step.name)
            context = step.func(context)
        self.logger.debug("Completed pipeline %s", self.name)
        return context


__all__ = ["Pipeline", "PipelineContext", "PipelineStep"]
