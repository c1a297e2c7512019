"""Tests for slideshow.merge — vertical pairing."""

import pytest

from slideshow.merge import merge_verticals
from slideshow.records import RawRecord


def _rec(orientation: str, tags: set[int], index: int) -> RawRecord:
    return RawRecord(orientation=orientation, tags=frozenset(tags), index=index)


class TestMergeVerticals:
    def test_horizontal_and_vertical_pairs_with_trailing_drop(self):
        a, b, c, d, e = range(5)
        records = [
            _rec("H", {a}, 0),
            _rec("V", {b}, 1),
            _rec("V", {c}, 2),
            _rec("H", {d}, 3),
            _rec("V", {e}, 4),
        ]
        result = merge_verticals(records)

        assert [e.id for e in result.entries] == [0, 1, 2]
        assert [e.source_indices for e in result.entries] == [(0,), (1, 2), (3,)]
        assert [e.tags for e in result.entries] == [
            frozenset({a}), frozenset({b, c}), frozenset({d}),
        ]
        assert result.dropped_indices == [4]
        assert result.n_dropped == 1

    def test_pair_tags_are_union(self):
        result = merge_verticals([_rec("V", {1, 2}, 0), _rec("V", {2, 3}, 1)])
        assert result.entries[0].tags == frozenset({1, 2, 3})

    def test_ids_follow_emission_order(self):
        # The pair is emitted on its second vertical, after the horizontal
        records = [_rec("V", {1}, 0), _rec("H", {2}, 1), _rec("V", {3}, 2)]
        result = merge_verticals(records)
        assert [(e.id, e.source_indices) for e in result.entries] == [(0, (1,)), (1, (0, 2))]

    def test_no_vertical_used_twice(self):
        records = [_rec("V", {i}, i) for i in range(6)]
        result = merge_verticals(records)
        seen = [i for e in result.entries for i in e.source_indices]
        assert sorted(seen) == list(range(6))
        assert all(len(e.source_indices) == 2 for e in result.entries)
        assert result.dropped_indices == []

    def test_single_vertical_dropped(self):
        result = merge_verticals([_rec("V", {1}, 0)])
        assert result.entries == []
        assert result.dropped_indices == [0]

    def test_empty_input(self):
        result = merge_verticals([])
        assert result.entries == []
        assert result.dropped_indices == []

    def test_unknown_orientation_raises(self):
        with pytest.raises(ValueError, match="Unknown orientation"):
            merge_verticals([_rec("D", {1}, 0)])
