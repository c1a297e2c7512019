"""CLI entry point and pipeline orchestration."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from slideshow.catalog import EmptyCatalogError
from slideshow.config import DEFAULTS
from slideshow.merge import merge_verticals
from slideshow.output import write_submission
from slideshow.pipeline import (
    PipelineArgumentError,
    PipelineParams,
    run_pipeline_shared,
)
from slideshow.records import ParseError, read_records
from slideshow.utils import setup_logging
from slideshow.walker import build_slideshow


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="slideshow",
        description="Order tagged photos into a slideshow by greedy interest score.",
    )
    p.add_argument("input_path", type=Path, help="Photo records file")
    p.add_argument(
        "--output-dir", type=Path, default=None,
        help="Directory for the submission file (default: next to the input)",
    )
    p.add_argument(
        "--sample-cap", type=int, default=DEFAULTS.sample_cap,
        help="Live slides examined per tag when gathering candidates",
    )
    p.add_argument(
        "--no-progress", dest="progress", action="store_false",
        help="Hide the progress bar",
    )
    p.set_defaults(progress=DEFAULTS.progress)
    return p


def _build_params(args: argparse.Namespace) -> PipelineParams:
    """Convert parsed CLI arguments into a validated PipelineParams."""
    try:
        return PipelineParams(
            input_path=args.input_path,
            output_dir=args.output_dir,
            sample_cap=int(args.sample_cap),
            progress=bool(args.progress),
        )
    except PipelineArgumentError as exc:
        raise SystemExit(f"Error: {exc}") from exc


def run_pipeline(args: argparse.Namespace) -> None:
    log = setup_logging()
    params = _build_params(args)

    try:
        outcome = run_pipeline_shared(
            params=params,
            read_records_fn=read_records,
            merge_verticals_fn=merge_verticals,
            build_slideshow_fn=build_slideshow,
            write_submission_fn=write_submission,
            log=log,
        )
    except (FileNotFoundError, ParseError, EmptyCatalogError) as exc:
        log.error("%s", exc)
        sys.exit(1)

    log.info(
        "Done! %d records → %d slides (score %d) → %s",
        outcome.n_records, outcome.n_slides, outcome.score, outcome.output_path,
    )


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    run_pipeline(args)
