"""JSON Lines CLI entry point for driving the pipeline from another process.

All structured output goes to stdout as JSON Lines (one JSON object per line).
All logging and diagnostic output goes to stderr.

Usage:
    python -m slideshow.cli_json run --input /path/to/photos.txt [options]
    python -m slideshow.cli_json check-output --input /path/to/photos.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from slideshow.config import DEFAULTS
from slideshow.merge import merge_verticals
from slideshow.output import write_submission
from slideshow.paths import output_path_for_input
from slideshow.pipeline import PipelineParams, run_pipeline_shared
from slideshow.records import read_records
from slideshow.walker import build_slideshow


def _setup_stderr_logging() -> None:
    """Force all logging output to stderr so stdout stays clean for JSON."""
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(message)s", datefmt="%H:%M:%S"),
    )
    root.addHandler(handler)
    root.setLevel(logging.INFO)


def _emit(obj: dict) -> None:
    """Write a single JSON object as one line to stdout and flush."""
    sys.stdout.write(json.dumps(obj, default=str) + "\n")
    sys.stdout.flush()


def _on_progress(step: str, detail: str, processed: int, total: int) -> None:
    _emit({
        "type": "progress",
        "step": step,
        "detail": detail,
        "processed": processed,
        "total": total,
    })


def _build_run_parser(subparsers: argparse._SubParsersAction) -> None:
    run_p = subparsers.add_parser("run", help="Order the slides and write the submission")
    run_p.add_argument("--input", dest="input_path", type=Path, required=True, help="Photo records file")
    run_p.add_argument("--output-dir", type=Path, default=None)
    run_p.add_argument("--sample-cap", type=int, default=DEFAULTS.sample_cap)


def _build_check_output_parser(subparsers: argparse._SubParsersAction) -> None:
    check_p = subparsers.add_parser("check-output", help="Check if the submission file exists")
    check_p.add_argument("--input", dest="input_path", type=Path, required=True, help="Photo records file")
    check_p.add_argument("--output-dir", type=Path, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slideshow-json",
        description="Slideshow JSON Lines CLI.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(subparsers)
    _build_check_output_parser(subparsers)
    return parser


def _handle_run(args: argparse.Namespace) -> None:
    """Execute the full pipeline, emitting JSON Lines progress to stdout."""
    try:
        params = PipelineParams(
            input_path=args.input_path,
            output_dir=args.output_dir,
            sample_cap=args.sample_cap,
            progress=False,
        )
        outcome = run_pipeline_shared(
            params=params,
            read_records_fn=read_records,
            merge_verticals_fn=merge_verticals,
            build_slideshow_fn=build_slideshow,
            write_submission_fn=write_submission,
            on_progress=_on_progress,
        )
    except Exception as exc:
        _emit({"type": "error", "message": str(exc)})
        sys.exit(1)

    _emit({
        "type": "complete",
        "output_path": str(outcome.output_path),
        "slides": outcome.n_slides,
        "score": outcome.score,
    })


def _handle_check_output(args: argparse.Namespace) -> None:
    output_path = output_path_for_input(args.input_path.resolve(), args.output_dir)

    if output_path.is_file():
        _emit({"type": "output", "exists": True, "path": str(output_path)})
    else:
        _emit({"type": "output", "exists": False})


def main() -> None:
    _setup_stderr_logging()

    parser = build_parser()
    args = parser.parse_args()

    if args.command == "run":
        _handle_run(args)
    elif args.command == "check-output":
        _handle_check_output(args)


if __name__ == "__main__":
    main()
