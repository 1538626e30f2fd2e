# -*- coding: utf-8 -*-
# Resxus/deck/units.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/12/2026

Purpose
-------
Minimal unit-system layer for deck values. Each deck declares one of the classic
input unit systems (METRIC, FIELD, LAB, SI); dimensioned items convert their raw
numbers to SI through the deck's `UnitSystem`.

Main Tasks
----------
    1. Keep per-system scale factors for the dimensions we consume (Pressure, Length, Time).
    2. Convert raw deck numbers to SI via `UnitSystem.to_si`.
    3. Resolve a unit system by (case-insensitive) name.

Notes
-----
- Only the dimensions used by the configuration layer are listed; extend `_FACTORS`
  when a new keyword needs another one.
"""

from typing import Dict

from .errors import DeckError

__all__ = ["UnitSystem", "UNIT_SYSTEMS", "get_unit_system"]


# --------------------------
# SI scale factors per system
# --------------------------
_BAR = 1.0e5
_PSIA = 6894.757293168361
_ATM = 101325.0
_FEET = 0.3048
_DAY = 86400.0
_HOUR = 3600.0

_FACTORS = {
    "METRIC": {"Pressure": _BAR,  "Length": 1.0,   "Time": _DAY},
    "FIELD":  {"Pressure": _PSIA, "Length": _FEET, "Time": _DAY},
    "LAB":    {"Pressure": _ATM,  "Length": 0.01,  "Time": _HOUR},
    "SI":     {"Pressure": 1.0,   "Length": 1.0,   "Time": 1.0},
}  # type: Dict[str, Dict[str, float]]


class UnitSystem:
    """
    Named set of dimension -> SI factors.

    Parameters
    ----------
    name : str
        One of "METRIC", "FIELD", "LAB", "SI".
    """

    def __init__(self, name: str):
        key = str(name).upper()
        if key not in _FACTORS:
            raise DeckError(
                "Unknown unit system {!r}. Allowed: {}".format(name, sorted(_FACTORS)),
                {"unit_system": name},
            )
        self.name = key
        self._factors = _FACTORS[key]

    def factor(self, dimension: str) -> float:
        try:
            return self._factors[dimension]
        except KeyError:
            raise DeckError(
                "Unsupported dimension {!r} for unit system {}".format(dimension, self.name),
                {"dimension": dimension, "allowed": sorted(self._factors)},
            )

    def to_si(self, dimension: str, value: float) -> float:
        """Scale a raw deck number of the given dimension to SI."""
        return float(value) * self.factor(dimension)

    def __eq__(self, other):
        return isinstance(other, UnitSystem) and other.name == self.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return "UnitSystem({!r})".format(self.name)


UNIT_SYSTEMS = {name: UnitSystem(name) for name in _FACTORS}


def get_unit_system(name) -> UnitSystem:
    """Return the shared `UnitSystem` for `name` (accepts an instance as pass-through)."""
    if isinstance(name, UnitSystem):
        return name
    key = str(name).upper()
    if key not in UNIT_SYSTEMS:
        # constructor raises the DeckError with context
        return UnitSystem(key)
    return UNIT_SYSTEMS[key]
