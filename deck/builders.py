# -*- coding: utf-8 -*-
# Resxus/deck/builders.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/13/2026

Purpose
-------
Convenience constructors for in-memory decks. Keyword rows are given as plain Python
lists; item names and dimensions come from `LAYOUTS`, so callers never spell out
`DeckItem`s by hand.

Main Tasks
----------
    1. Declare record layouts (item name, dimension) for the keywords we consume.
    2. `make_record` / `make_keyword`: rows -> DeckRecord / DeckKeyword.
    3. `make_deck`: sectioned mapping -> Deck (markers inserted in section order).

Notes
-----
- Rows shorter than the layout are padded with defaulted (None) slots.
- Keywords absent from `LAYOUTS` are flag keywords (no records), e.g. DISGAS.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .deck import Deck, SECTION_NAMES
from .errors import DeckError
from .items import DeckItem, DeckKeyword, DeckRecord

__all__ = ["LAYOUTS", "make_record", "make_keyword", "make_deck"]


# --------------------------
# Record layouts: keyword -> [(item, dimension)]
# --------------------------
LAYOUTS = {
    "THPRES": [("REGION1", None), ("REGION2", None), ("VALUE", "Pressure")],
    "EQLOPTS": [("OPTION1", None), ("OPTION2", None), ("OPTION3", None), ("OPTION4", None)],
}  # type: Dict[str, List[Tuple[str, Optional[str]]]]


def make_record(name: str, row: Sequence[Any]) -> DeckRecord:
    """Build one record of keyword `name` from a row of raw values."""
    if name not in LAYOUTS:
        raise DeckError("No record layout for keyword {}".format(name), {"keyword": name})
    layout = LAYOUTS[name]
    if len(row) > len(layout):
        raise DeckError(
            "Too many values for {}: got {}, layout has {}".format(name, len(row), len(layout)),
            {"keyword": name, "row": list(row)},
        )
    padded = list(row) + [None] * (len(layout) - len(row))
    items = [DeckItem(item, [val], dimension=dim) for (item, dim), val in zip(layout, padded)]
    return DeckRecord(items)


def make_keyword(name: str, rows: Optional[Sequence[Sequence[Any]]] = None) -> DeckKeyword:
    """Build a keyword from rows; no rows -> a flag keyword."""
    records = [make_record(name, row) for row in (rows or [])]
    return DeckKeyword(name, records)


def make_deck(sections: Mapping[str, Mapping[str, Any]], unit_system="METRIC") -> Deck:
    """
    Build a `Deck` from {section: {keyword: rows_or_None}}.

    Sections are emitted in canonical order regardless of mapping order; keywords keep
    the mapping's order within a section.
    """
    unknown = [s for s in sections if s not in SECTION_NAMES]
    if unknown:
        raise DeckError("Unknown section(s): {}".format(unknown), {"allowed": list(SECTION_NAMES)})

    keywords = []  # type: List[DeckKeyword]
    for sec in SECTION_NAMES:
        if sec not in sections:
            continue
        keywords.append(DeckKeyword(sec))
        for kw_name, rows in (sections[sec] or {}).items():
            keywords.append(make_keyword(kw_name, rows))
    return Deck(keywords, unit_system=unit_system)
