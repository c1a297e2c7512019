"""Tests for slideshow.catalog — entries and use-state ownership."""

import pytest

from slideshow.catalog import Catalog, Entry


def _catalog(n: int) -> Catalog:
    return Catalog(Entry(id=i, source_indices=(i,), tags=frozenset({i})) for i in range(n))


class TestCatalog:
    def test_len_iter_and_getitem(self):
        catalog = _catalog(3)
        assert len(catalog) == 3
        assert [e.id for e in catalog] == [0, 1, 2]
        assert catalog[1].source_indices == (1,)

    def test_rejects_non_dense_ids(self):
        with pytest.raises(ValueError, match="dense"):
            Catalog([Entry(id=1, source_indices=(0,), tags=frozenset())])

    def test_get_unknown_id_returns_none(self):
        catalog = _catalog(2)
        assert catalog.get(5) is None
        assert catalog.get(-1) is None
        assert catalog.get(1) is catalog[1]

    def test_mark_used_flips_once(self):
        catalog = _catalog(2)
        entry = catalog.mark_used(0)
        assert entry.used
        assert catalog.n_unused == 1
        with pytest.raises(ValueError, match="already in the slideshow"):
            catalog.mark_used(0)
        assert catalog.n_unused == 1

    def test_is_live(self):
        catalog = _catalog(2)
        catalog.mark_used(1)
        assert catalog.is_live(0)
        assert not catalog.is_live(1)
        assert not catalog.is_live(7)

    def test_pick_lowest_unused(self):
        catalog = _catalog(4)
        catalog.mark_used(0)
        catalog.mark_used(2)
        assert catalog.pick_lowest_unused().id == 1
        catalog.mark_used(1)
        assert catalog.pick_lowest_unused().id == 3
        catalog.mark_used(3)
        assert catalog.pick_lowest_unused() is None

    def test_pick_lowest_unused_is_stable_without_commit(self):
        catalog = _catalog(2)
        assert catalog.pick_lowest_unused().id == 0
        assert catalog.pick_lowest_unused().id == 0

    def test_counts_pre_used_entries(self):
        entries = [
            Entry(id=0, source_indices=(0,), tags=frozenset()),
            Entry(id=1, source_indices=(1,), tags=frozenset(), used=True),
        ]
        assert Catalog(entries).n_unused == 1


def test_entry_n_tags():
    entry = Entry(id=0, source_indices=(3, 4), tags=frozenset({1, 2, 3}))
    assert entry.n_tags == 3
    assert not entry.used
