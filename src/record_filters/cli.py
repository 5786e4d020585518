"""Command line interface for record-filters."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import AppConfig, load_config
from .pipelines.records import ANIMALS, IDS, PIPELINES, build_pipeline

HEADINGS = {
    ANIMALS: "Animals:",
    IDS: "IDs:",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify the built-in records into animals and IDs.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level to use.",
    )
    parser.add_argument(
        "--pipeline",
        action="append",
        choices=sorted(PIPELINES),
        help="Only print the given pipeline (may be repeated). Defaults to all.",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format="%(levelname)s %(name)s %(message)s")


def run_pipelines(names: Sequence[str], config: AppConfig) -> int:
    for name in names:
        # Every pipeline receives the original, unfiltered records.
        result = build_pipeline(name, config)(config.records)
        print(HEADINGS[name])
        for record in result:
            print(record)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    names = args.pipeline or [ANIMALS, IDS]
    return run_pipelines(names, load_config())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
