# -*- coding: utf-8 -*-
# Resxus/grid/properties.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/14/2026

Purpose:
--------
Lightweight per-cell integer grid properties (EQLNUM, FIPNUM, ...) backed by NumPy,
plus a name-keyed container answering existence/lookup queries for the configuration
layer.

Main Tasks:
-----------
    1) `IntGridProperty`: validate and hold a flat int array; max helper.
    2) `GridProperties`: register properties by name; has/get accessors.

Notes:
------
- Data is flattened to 1D (cell order is irrelevant to region scans).
- Arrays are copied and made read-only so a built configuration cannot be altered
  through the grid afterwards.
"""

from typing import Dict, Iterable, Mapping, Optional, Union
import numpy as np

__all__ = ["IntGridProperty", "GridProperties"]


class IntGridProperty:
    """
    Integer per-cell property.

    Parameters
    ----------
    name : str
        Property keyword (e.g., "EQLNUM").
    data : array-like of int
        Cell values, any shape; stored flattened.

    Raises
    ------
    ValueError
        If `data` is empty or holds non-integer values.
    """

    def __init__(self, name: str, data: Union[np.ndarray, Iterable[int]]):
        arr = np.asarray(list(data) if not isinstance(data, np.ndarray) else data)
        if arr.size == 0:
            raise ValueError(f"[IntGridProperty] {name}: empty data.")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"[IntGridProperty] {name}: expected integer data, got dtype {arr.dtype}.")
        arr = np.array(arr, dtype=np.int64).ravel()
        arr.setflags(write=False)
        self.name = name
        self._data = arr

    @property
    def data(self) -> np.ndarray:
        return self._data

    def __len__(self) -> int:
        return int(self._data.size)

    def max_value(self) -> int:
        return int(np.max(self._data))


class GridProperties:
    """Name -> IntGridProperty registry."""

    def __init__(self, properties: Optional[Mapping[str, Union[IntGridProperty, Iterable[int]]]] = None):
        self._int_props: Dict[str, IntGridProperty] = {}
        for name, val in (properties or {}).items():
            self.add(name, val)

    def add(self, name: str, prop) -> IntGridProperty:
        if not isinstance(prop, IntGridProperty):
            prop = IntGridProperty(name, prop)
        self._int_props[name] = prop
        return prop

    def has_int_grid_property(self, name: str) -> bool:
        return name in self._int_props

    def get_int_grid_property(self, name: str) -> IntGridProperty:
        if name not in self._int_props:
            raise KeyError(f"[GridProperties] No integer grid property named {name!r}.")
        return self._int_props[name]
