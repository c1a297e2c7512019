"""Output: write the slideshow submission file."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from slideshow.catalog import Catalog

logger = logging.getLogger("slideshow")


def format_submission(catalog: Catalog, order: Sequence[int]) -> Iterator[str]:
    """Yield the slide count line, then each slide's original record indices."""
    yield str(len(order))
    for entry_id in order:
        yield " ".join(str(i) for i in catalog[entry_id].source_indices)


def write_submission(catalog: Catalog, order: Sequence[int], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(format_submission(catalog, order)) + "\n")
    logger.info("Submission written → %s", output_path)
