# -*- coding: utf-8 -*-
# Resxus/deck/deck.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/13/2026

Purpose
-------
Ordered keyword container (`Deck`) and section views (`Section`). A section is the
run of keywords between its marker keyword (e.g. RUNSPEC) and the next marker.

Main Tasks
----------
    1. Hold keywords in deck order and bind the deck's unit system to every item.
    2. Answer keyword presence / lookup at deck level.
    3. Slice the deck into sections and answer presence / lookup per section.

Notes
-----
- When a keyword occurs more than once, `get_keyword` returns the last occurrence.
- Section markers carry no records themselves.
"""

from typing import Iterator, List, Sequence

from .errors import DeckError
from .items import DeckKeyword
from .units import UnitSystem, get_unit_system

__all__ = ["Deck", "Section", "SECTION_NAMES"]

SECTION_NAMES = (
    "RUNSPEC",
    "GRID",
    "EDIT",
    "PROPS",
    "REGIONS",
    "SOLUTION",
    "SUMMARY",
    "SCHEDULE",
)


def _last_named(keywords: Sequence[DeckKeyword], name: str, where: str) -> DeckKeyword:
    for kw in reversed(keywords):
        if kw.name == name:
            return kw
    raise DeckError("Keyword {} not found in {}".format(name, where), {"keyword": name})


class Deck:
    """
    Parsed input deck: ordered keywords plus the declared unit system.

    Parameters
    ----------
    keywords : Sequence[DeckKeyword]
        Keywords in deck order, section markers included.
    unit_system : str | UnitSystem
        Deck unit system (default "METRIC").
    """

    def __init__(self, keywords: Sequence[DeckKeyword], unit_system="METRIC"):
        self.unit_system = get_unit_system(unit_system)  # type: UnitSystem
        self._keywords = list(keywords)  # type: List[DeckKeyword]
        for kw in self._keywords:
            for item in kw.items():
                item.bind_unit_system(self.unit_system)

    def __len__(self) -> int:
        return len(self._keywords)

    def __iter__(self) -> Iterator[DeckKeyword]:
        return iter(self._keywords)

    @property
    def keywords(self) -> List[DeckKeyword]:
        return list(self._keywords)

    def has_keyword(self, name: str) -> bool:
        return any(kw.name == name for kw in self._keywords)

    def get_keyword(self, name: str) -> DeckKeyword:
        return _last_named(self._keywords, name, "deck")

    def has_section(self, name: str) -> bool:
        return Section.has_section(self, name)

    def get_section(self, name: str) -> "Section":
        return Section(self, name)


class Section:
    """
    View over the keywords of one deck section.

    Raises
    ------
    DeckError
        If `name` is not a known section or its marker is absent from the deck.
    """

    def __init__(self, deck: Deck, name: str):
        if name not in SECTION_NAMES:
            raise DeckError("Unknown section {!r}".format(name), {"allowed": list(SECTION_NAMES)})
        if not Section.has_section(deck, name):
            raise DeckError("Deck has no {} section".format(name), {"section": name})
        self.name = name
        self.unit_system = deck.unit_system
        self._keywords = self._slice(deck, name)

    @staticmethod
    def has_section(deck: Deck, name: str) -> bool:
        return deck.has_keyword(name)

    @staticmethod
    def _slice(deck: Deck, name: str) -> List[DeckKeyword]:
        out = []  # type: List[DeckKeyword]
        inside = False
        for kw in deck:
            if kw.name in SECTION_NAMES:
                inside = kw.name == name
                continue
            if inside:
                out.append(kw)
        return out

    def __len__(self) -> int:
        return len(self._keywords)

    def __iter__(self) -> Iterator[DeckKeyword]:
        return iter(self._keywords)

    def has_keyword(self, name: str) -> bool:
        return any(kw.name == name for kw in self._keywords)

    def get_keyword(self, name: str) -> DeckKeyword:
        return _last_named(self._keywords, name, "section " + self.name)
