"""Greedy nearest-neighbour walk that builds the slideshow order.

The walk seeds with entry 0, then repeatedly picks the unused entry with the
best interest score against the current slide among those sharing at least
one tag with it. When nothing shares a tag, it falls back to the lowest unused
id. Each commit marks the entry used and prunes it from its own tag sets.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from slideshow.catalog import Catalog, EmptyCatalogError, Entry
from slideshow.config import DEFAULTS
from slideshow.scoring import score_candidates
from slideshow.tag_index import TagIndex

logger = logging.getLogger("slideshow")

StepCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class SlideshowResult:
    order: list[int]
    steps: int
    fallbacks: int
    score: int


def gather_candidates(
    current: Entry,
    catalog: Catalog,
    index: TagIndex,
    sample_cap: int = DEFAULTS.sample_cap,
) -> dict[int, int]:
    """Count shared tags between *current* and every live entry reachable by tag."""
    shared: dict[int, int] = {}
    for tag in current.tags:
        for entry_id in index.live_ids(tag, catalog, sample_cap):
            shared[entry_id] = shared.get(entry_id, 0) + 1
    return shared


def select_candidate(
    candidates: dict[int, int],
    catalog: Catalog,
    current: Entry,
) -> tuple[int, int]:
    """Return ``(entry_id, score)`` of the best candidate.

    Ties on score go to the lowest entry id.
    """
    ids = sorted(candidates)
    shared = np.array([candidates[i] for i in ids], dtype=np.int64)
    sizes = np.array([catalog[i].n_tags for i in ids], dtype=np.int64)
    scores = score_candidates(shared, sizes, current.n_tags)
    # argmax returns the first maximum, i.e. the lowest id
    best = int(np.argmax(scores))
    return ids[best], int(scores[best])


def _commit(entry_id: int, catalog: Catalog, index: TagIndex, order: list[int]) -> Entry:
    entry = catalog.mark_used(entry_id)
    index.discard(entry)
    order.append(entry_id)
    return entry


def build_slideshow(
    catalog: Catalog,
    index: TagIndex,
    *,
    sample_cap: int = DEFAULTS.sample_cap,
    on_step: StepCallback | None = None,
    progress: bool = False,
) -> SlideshowResult:
    """Order every entry of *catalog* greedily by interest score.

    Mutates the catalog's ``used`` flags and the index sets.
    """
    total = len(catalog)
    if total == 0:
        raise EmptyCatalogError("No slides to order: catalog is empty after merging verticals")

    order: list[int] = []
    current = _commit(0, catalog, index, order)
    remaining = total - 1
    steps = 0
    fallbacks = 0
    score = 0

    with tqdm(total=total, initial=1, desc="Ordering slides", disable=not progress) as bar:
        while remaining > 0:
            candidates = gather_candidates(current, catalog, index, sample_cap)
            if candidates:
                entry_id, step_score = select_candidate(candidates, catalog, current)
            else:
                fallback = catalog.pick_lowest_unused()
                if fallback is None:
                    logger.warning("Catalog exhausted with %d slides still expected", remaining)
                    break
                entry_id, step_score = fallback.id, 0
                fallbacks += 1

            current = _commit(entry_id, catalog, index, order)
            score += step_score
            remaining -= 1
            steps += 1
            bar.update(1)
            if on_step is not None:
                on_step(remaining, total)

    logger.info(
        "Ordered %d slides in %d steps (%d fallbacks, score %d)",
        len(order), steps, fallbacks, score,
    )
    return SlideshowResult(order=order, steps=steps, fallbacks=fallbacks, score=score)
