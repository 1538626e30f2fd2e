"""
Tests for the region-pair key and barrier variants.
"""

import dataclasses

import pytest

from simconfig.regions import RegionPair, ValuedBarrier, UnvaluedBarrier


class TestRegionPair:

    def test_canonical_order(self):
        p = RegionPair.of(5, 2)
        assert (p.first, p.second) == (2, 5)

    def test_order_independent_equality_and_hash(self):
        assert RegionPair.of(3, 7) == RegionPair.of(7, 3)
        assert hash(RegionPair.of(3, 7)) == hash(RegionPair.of(7, 3))
        assert len({RegionPair.of(1, 2), RegionPair.of(2, 1), RegionPair.of(2, 2)}) == 2

    def test_direct_construction_must_be_canonical(self):
        with pytest.raises(ValueError):
            RegionPair(4, 1)

    def test_frozen(self):
        p = RegionPair.of(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.first = 9

    def test_sorting(self):
        pairs = sorted([RegionPair.of(3, 1), RegionPair.of(2, 1), RegionPair.of(1, 1)])
        assert [(p.first, p.second) for p in pairs] == [(1, 1), (1, 2), (1, 3)]


class TestBarriers:

    def test_valued(self):
        b = ValuedBarrier(1.5e5)
        assert b.has_value
        assert b.pressure == 1.5e5

    def test_unvalued_has_no_pressure(self):
        b = UnvaluedBarrier()
        assert not b.has_value
        assert not hasattr(b, "pressure")
        assert b == UnvaluedBarrier()
