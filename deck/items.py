# -*- coding: utf-8 -*-
# Resxus/deck/items.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/12/2026

Purpose
-------
Typed containers for already-parsed deck data: `DeckItem` (named value slots),
`DeckRecord` (ordered items) and `DeckKeyword` (named list of records). These are
the objects the configuration layer walks; no text parsing happens here.

Main Tasks
----------
    1. `DeckItem`: slot-level `has_value` predicate and typed accessors
       (`get_int`, `get_string`, `get_raw_double`, `get_si_double`).
    2. `DeckRecord`: name lookup of items plus ordered iteration.
    3. `DeckKeyword`: record access by index plus iteration.

Notes
-----
- A `None` slot is a defaulted value (the deck author wrote `1*` or left it out).
- `get_si_double` needs a unit system; `Deck` binds its own to every item at
  construction, standalone items can receive one explicitly.
"""

from typing import Any, Iterator, List, Optional, Sequence
import numbers

from .errors import DeckError
from .units import UnitSystem, get_unit_system

__all__ = ["DeckItem", "DeckRecord", "DeckKeyword"]


class DeckItem:
    """
    One named item of a record, holding one or more value slots.

    Parameters
    ----------
    name : str
        Item name as given by the keyword layout (e.g. "REGION1").
    values : Sequence[Any]
        Raw slot values; `None` marks a defaulted slot.
    dimension : str, optional
        Physical dimension for `get_si_double` (e.g. "Pressure").
    unit_system : UnitSystem | str, optional
        Unit system used for SI conversion. Usually bound later by `Deck`.
    """

    def __init__(self, name: str, values: Sequence[Any], dimension: Optional[str] = None,
                 unit_system=None):
        self.name = name
        self._values = list(values)
        self.dimension = dimension
        self.unit_system = get_unit_system(unit_system) if unit_system is not None else None

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return "DeckItem({!r}, {!r})".format(self.name, self._values)

    def bind_unit_system(self, unit_system: UnitSystem) -> None:
        self.unit_system = unit_system

    def has_value(self, index: int) -> bool:
        """True iff slot `index` exists and is not defaulted."""
        return 0 <= index < len(self._values) and self._values[index] is not None

    def _slot(self, index: int) -> Any:
        if not self.has_value(index):
            raise DeckError(
                "Item {} has no value at index {}".format(self.name, index),
                {"item": self.name, "index": index},
            )
        return self._values[index]

    def get_int(self, index: int) -> int:
        val = self._slot(index)
        if isinstance(val, bool) or not isinstance(val, numbers.Integral):
            raise DeckError(
                "Item {} holds {!r}, expected int".format(self.name, val),
                {"item": self.name, "index": index},
            )
        return int(val)

    def get_string(self, index: int) -> str:
        val = self._slot(index)
        if not isinstance(val, str):
            raise DeckError(
                "Item {} holds {!r}, expected str".format(self.name, val),
                {"item": self.name, "index": index},
            )
        return val

    def get_raw_double(self, index: int) -> float:
        val = self._slot(index)
        if isinstance(val, bool) or not isinstance(val, numbers.Real):
            raise DeckError(
                "Item {} holds {!r}, expected a number".format(self.name, val),
                {"item": self.name, "index": index},
            )
        return float(val)

    def get_si_double(self, index: int) -> float:
        """
        Return slot `index` converted to SI using the item's dimension.

        Raises
        ------
        DeckError
            If the slot is defaulted/non-numeric, or the item has no dimension
            or no bound unit system.
        """
        raw = self.get_raw_double(index)
        if self.dimension is None:
            raise DeckError("Item {} is dimensionless; no SI value".format(self.name),
                            {"item": self.name})
        if self.unit_system is None:
            raise DeckError("Item {} has no unit system bound".format(self.name),
                            {"item": self.name})
        return self.unit_system.to_si(self.dimension, raw)


class DeckRecord:
    """Ordered collection of `DeckItem`s with lookup by name."""

    def __init__(self, items: Sequence[DeckItem]):
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DeckItem]:
        return iter(self._items)

    def has_item(self, name: str) -> bool:
        return any(it.name == name for it in self._items)

    def get_item(self, name: str) -> DeckItem:
        for it in self._items:
            if it.name == name:
                return it
        raise DeckError(
            "Record has no item named {!r}".format(name),
            {"items": [it.name for it in self._items]},
        )


class DeckKeyword:
    """A named keyword with its records, as produced by the deck parser."""

    def __init__(self, name: str, records: Optional[Sequence[DeckRecord]] = None):
        self.name = name
        self._records = list(records or [])  # type: List[DeckRecord]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DeckRecord]:
        return iter(self._records)

    def __repr__(self):
        return "DeckKeyword({!r}, n_records={})".format(self.name, len(self._records))

    def get_record(self, index: int) -> DeckRecord:
        try:
            return self._records[index]
        except IndexError:
            raise DeckError(
                "Keyword {} has no record {}".format(self.name, index),
                {"keyword": self.name, "n_records": len(self._records)},
            )

    def items(self) -> Iterator[DeckItem]:
        """Every item of every record (used to bind unit systems)."""
        for rec in self._records:
            for it in rec:
                yield it
