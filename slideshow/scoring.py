"""Interest score between consecutive slides."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from slideshow.catalog import Catalog


def interest_score(a: frozenset[int] | set[int], b: frozenset[int] | set[int]) -> int:
    """min(|a ∩ b|, |a \\ b|, |b \\ a|)."""
    shared = len(a & b)
    return min(shared, len(a) - shared, len(b) - shared)


def score_candidates(
    shared: np.ndarray,
    sizes: np.ndarray,
    current_size: int,
) -> np.ndarray:
    """Vectorised interest score from shared-tag counts and candidate tag counts."""
    return np.minimum(shared, np.minimum(sizes - shared, current_size - shared))


def slideshow_score(catalog: Catalog, order: Sequence[int]) -> int:
    """Total interest over every consecutive pair of *order*."""
    total = 0
    for prev_id, next_id in zip(order, order[1:]):
        total += interest_score(catalog[prev_id].tags, catalog[next_id].tags)
    return total
