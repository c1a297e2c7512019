"""Pair consecutive vertical photos into single catalog entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from slideshow.catalog import Entry
from slideshow.config import DEFAULTS
from slideshow.records import RawRecord

logger = logging.getLogger("slideshow")


@dataclass(frozen=True)
class MergeResult:
    entries: list[Entry]
    dropped_indices: list[int]

    @property
    def n_dropped(self) -> int:
        return len(self.dropped_indices)


def merge_verticals(records: Iterable[RawRecord]) -> MergeResult:
    """Emit one entry per horizontal record and one per consecutive vertical pair.

    Ids follow emission order. A trailing unpaired vertical gets no entry;
    its original index is reported in ``dropped_indices``.
    """
    entries: list[Entry] = []
    pending: RawRecord | None = None

    for record in records:
        if record.orientation == DEFAULTS.horizontal:
            entries.append(Entry(
                id=len(entries),
                source_indices=(record.index,),
                tags=record.tags,
            ))
        elif record.orientation == DEFAULTS.vertical:
            if pending is None:
                pending = record
                continue
            entries.append(Entry(
                id=len(entries),
                source_indices=(pending.index, record.index),
                tags=pending.tags | record.tags,
            ))
            pending = None
        else:
            raise ValueError(f"Unknown orientation {record.orientation!r} for record {record.index}")

    dropped = [pending.index] if pending is not None else []
    if dropped:
        logger.warning(
            "Odd number of vertical photos: dropped %d trailing vertical (record %d)",
            len(dropped), dropped[0],
        )
    return MergeResult(entries=entries, dropped_indices=dropped)
