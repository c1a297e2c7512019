"""Helpers for submission output paths."""

from __future__ import annotations

from pathlib import Path

from slideshow.config import DEFAULTS


def output_path_for_input(input_path: Path, output_dir: Path | None = None) -> Path:
    """Return the submission path for an input file.

    Same base name as the input with the fixed submission suffix, placed
    next to the input unless *output_dir* is given.
    """
    directory = output_dir if output_dir is not None else input_path.parent
    return directory / f"{input_path.stem}{DEFAULTS.output_suffix}"
