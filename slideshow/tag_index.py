"""Inverted index from tag id to the entries carrying it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from slideshow.catalog import Catalog, Entry


class TagIndex:
    """Map each tag to an insertion-ordered set of entry ids.

    Ids are only removed from the sets of the selected entry's own tags, so
    a set may still reference entries consumed through another tag. Readers
    filter those through the catalog via :meth:`live_ids`.
    """

    def __init__(self) -> None:
        # dict keys as an ordered set: O(1) removal, iteration in id order
        self._sets: dict[int, dict[int, None]] = {}

    @classmethod
    def build(cls, entries: Iterable[Entry]) -> TagIndex:
        index = cls()
        for entry in entries:
            index.add(entry)
        return index

    def __len__(self) -> int:
        return len(self._sets)

    def __contains__(self, tag: int) -> bool:
        return tag in self._sets

    def add(self, entry: Entry) -> None:
        for tag in entry.tags:
            self._sets.setdefault(tag, {})[entry.id] = None

    def ids_for(self, tag: int) -> tuple[int, ...]:
        """Raw ids stored for *tag*, stale ones included."""
        return tuple(self._sets.get(tag, ()))

    def live_ids(self, tag: int, catalog: Catalog, cap: int | None = None) -> Iterator[int]:
        """Yield ids for *tag* that the catalog holds and has not used yet.

        Stops after *cap* live ids; skipped ids do not count toward the cap.
        """
        remaining = cap
        for entry_id in self._sets.get(tag, ()):
            if remaining is not None and remaining <= 0:
                return
            if not catalog.is_live(entry_id):
                continue
            yield entry_id
            if remaining is not None:
                remaining -= 1

    def discard(self, entry: Entry) -> None:
        """Drop *entry* from the sets of its own tags only."""
        for tag in entry.tags:
            bucket = self._sets.get(tag)
            if bucket is not None:
                bucket.pop(entry.id, None)
