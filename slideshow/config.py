"""Default configuration constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Defaults:
    # Greedy walk: live entries examined per tag when gathering candidates.
    # Larger values trade throughput for better transitions on dense tags.
    sample_cap: int = 5000

    # Progress bar on the terminal CLI
    progress: bool = True
    # Walk progress events sent to on_progress callbacks per run
    walk_progress_updates: int = 100

    # Output
    output_suffix: str = "_submission.txt"

    # Input orientations
    horizontal: str = "H"
    vertical: str = "V"


DEFAULTS = Defaults()
