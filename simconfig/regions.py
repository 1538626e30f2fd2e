# -*- coding: utf-8 -*-
# Resxus/simconfig/regions.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/15/2026

Purpose:
--------
Key and value types of the threshold-pressure table.

Conventions:
------------
   - `RegionPair` is unordered: `RegionPair.of(a, b)` always stores (min, max), so
     (a, b) and (b, a) compare and hash equal. Build pairs only through `of`.
   - A barrier is either `UnvaluedBarrier` (declared, magnitude not given) or
     `ValuedBarrier` (magnitude in Pa). "No barrier" is the absence of a key.
"""

from dataclasses import dataclass
from typing import Union

__all__ = ["RegionPair", "ValuedBarrier", "UnvaluedBarrier", "Barrier"]


@dataclass(frozen=True, order=True)
class RegionPair:
    first: int
    second: int

    def __post_init__(self):
        if self.first > self.second:
            raise ValueError(
                f"RegionPair must be canonical (first <= second), got ({self.first}, {self.second}); "
                "use RegionPair.of()."
            )

    @classmethod
    def of(cls, r1: int, r2: int) -> "RegionPair":
        r1, r2 = int(r1), int(r2)
        return cls(r1, r2) if r1 <= r2 else cls(r2, r1)


@dataclass(frozen=True)
class ValuedBarrier:
    pressure: float

    @property
    def has_value(self) -> bool:
        return True


@dataclass(frozen=True)
class UnvaluedBarrier:

    @property
    def has_value(self) -> bool:
        return False


Barrier = Union[ValuedBarrier, UnvaluedBarrier]
