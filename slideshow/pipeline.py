"""Shared pipeline orchestration used by the CLI and JSON Lines layers."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from slideshow.catalog import Catalog
from slideshow.config import DEFAULTS
from slideshow.merge import MergeResult
from slideshow.paths import output_path_for_input
from slideshow.records import ParsedInput, RawRecord
from slideshow.scoring import slideshow_score
from slideshow.tag_index import TagIndex
from slideshow.utils import ensure_logging
from slideshow.walker import SlideshowResult

ProgressCallback = Callable[[str, str, int, int], None]
ReadFn = Callable[[Path], ParsedInput]
MergeFn = Callable[[list[RawRecord]], MergeResult]
WalkFn = Callable[..., SlideshowResult]
OutputFn = Callable[[Catalog, Sequence[int], Path], None]


class PipelineArgumentError(ValueError):
    """Raised when runtime pipeline parameters are invalid."""


@dataclass(frozen=True)
class PipelineParams:
    """Typed, validated pipeline parameters.

    All callers (CLI, JSON bridge, tests) construct this instead of passing
    an ``argparse.Namespace`` around.
    """

    input_path: Path
    output_dir: Path | None = None
    sample_cap: int = DEFAULTS.sample_cap
    progress: bool = DEFAULTS.progress

    def __post_init__(self) -> None:
        validate_pipeline_parameters(sample_cap=self.sample_cap)


def validate_pipeline_parameters(*, sample_cap: int) -> None:
    """Validate user-facing pipeline parameters."""
    if isinstance(sample_cap, bool) or not isinstance(sample_cap, int):
        raise PipelineArgumentError(f"--sample-cap must be an integer, got {sample_cap!r}")
    if sample_cap < 1:
        raise PipelineArgumentError("--sample-cap must be >= 1")


@dataclass(frozen=True)
class PipelineOutcome:
    output_path: Path
    n_records: int
    n_slides: int
    n_dropped: int
    fallbacks: int
    score: int


def run_pipeline_shared(
    *,
    params: PipelineParams,
    read_records_fn: ReadFn,
    merge_verticals_fn: MergeFn,
    build_slideshow_fn: WalkFn,
    write_submission_fn: OutputFn,
    on_progress: ProgressCallback | None = None,
    log: logging.Logger | None = None,
) -> PipelineOutcome:
    if log is None:
        ensure_logging()
    logger = log or logging.getLogger("slideshow")

    def emit(step: str, detail: str, processed: int = 0, total: int = 0) -> None:
        if on_progress is not None:
            on_progress(step, detail, processed, total)

    input_path = params.input_path.resolve()

    # Step 1 — parse records
    emit("parse", "Reading photo records…")
    parsed = read_records_fn(input_path)
    n_records = len(parsed.records)
    emit("parse", f"Read {n_records} records", n_records, n_records)

    # Step 2 — pair verticals
    emit("merge", "Pairing vertical photos…")
    merged = merge_verticals_fn(parsed.records)
    catalog = Catalog(merged.entries)
    logger.info(
        "Built %d slides from %d records (%d unpaired vertical dropped)",
        len(catalog), n_records, merged.n_dropped,
    )
    emit("merge", f"{len(catalog)} slides", len(catalog), len(catalog))

    # Step 3 — tag index
    emit("index", "Indexing tags…")
    index = TagIndex.build(catalog)
    logger.info("Indexed %d tags", len(index))
    emit("index", f"{len(index)} tags indexed")

    # Step 4 — greedy walk
    total = len(catalog)
    emit("walk", "Ordering slides…", 0, total)

    # At most ~walk_progress_updates walk events, plus the final one
    every = max(1, math.ceil(total / DEFAULTS.walk_progress_updates))

    def _on_step(remaining: int, total: int) -> None:
        processed = total - remaining
        if remaining == 0 or processed % every == 0:
            emit("walk", f"{remaining}/{total} left", processed, total)

    result = build_slideshow_fn(
        catalog,
        index,
        sample_cap=params.sample_cap,
        on_step=_on_step,
        progress=params.progress,
    )
    score = slideshow_score(catalog, result.order)
    logger.info("Slideshow score: %d", score)
    emit("walk", "Slides ordered", total, total)

    # Step 5 — write submission
    emit("output", "Writing submission…")
    output_path = output_path_for_input(input_path, params.output_dir)
    write_submission_fn(catalog, result.order, output_path)
    emit("output", "Submission written")

    return PipelineOutcome(
        output_path=output_path,
        n_records=n_records,
        n_slides=len(result.order),
        n_dropped=merged.n_dropped,
        fallbacks=result.fallbacks,
        score=score,
    )
