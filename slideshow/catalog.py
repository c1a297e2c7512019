"""Photo catalog: slide-ready entries and their consumption state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class EmptyCatalogError(RuntimeError):
    """Raised when there is no entry to seed the slideshow with."""


@dataclass(eq=False)
class Entry:
    """One horizontal photo or one merged pair of vertical photos.

    ``id``, ``source_indices`` and ``tags`` never change after creation.
    ``used`` is flipped once, by :meth:`Catalog.mark_used`.
    """

    id: int
    source_indices: tuple[int, ...]
    tags: frozenset[int]
    used: bool = False

    @property
    def n_tags(self) -> int:
        return len(self.tags)


class Catalog:
    """Owns every entry and is the only place ``used`` is mutated.

    Entry ids are dense, so the catalog is a list indexed by id.
    """

    def __init__(self, entries: Iterable[Entry]) -> None:
        self._entries: list[Entry] = list(entries)
        for position, entry in enumerate(self._entries):
            if entry.id != position:
                raise ValueError(
                    f"Entry ids must be dense from 0, got id {entry.id} at position {position}"
                )
        self._n_used = sum(1 for entry in self._entries if entry.used)
        # Lowest id that may still be unused; only moves forward.
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, entry_id: int) -> Entry:
        return self._entries[entry_id]

    def get(self, entry_id: int) -> Entry | None:
        """Return the entry, or ``None`` for an id the catalog does not hold."""
        if 0 <= entry_id < len(self._entries):
            return self._entries[entry_id]
        return None

    def is_live(self, entry_id: int) -> bool:
        entry = self.get(entry_id)
        return entry is not None and not entry.used

    @property
    def n_unused(self) -> int:
        return len(self._entries) - self._n_used

    def mark_used(self, entry_id: int) -> Entry:
        entry = self._entries[entry_id]
        if entry.used:
            raise ValueError(f"Entry {entry_id} is already in the slideshow")
        entry.used = True
        self._n_used += 1
        return entry

    def pick_lowest_unused(self) -> Entry | None:
        """Return the unused entry with the smallest id, or ``None`` if exhausted."""
        while self._cursor < len(self._entries):
            entry = self._entries[self._cursor]
            if not entry.used:
                return entry
            self._cursor += 1
        return None
