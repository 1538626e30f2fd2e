# -*- coding: utf-8 -*-
# Resxus/deck/__init__.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/13/2026

Modules:
--------
- items:    DeckItem / DeckRecord / DeckKeyword containers for already-parsed keyword data.
            Slot-level has_value predicate; typed int/string/double and SI accessors.

- deck:     Deck (ordered keywords + unit system) and Section views between section markers.

- units:    METRIC / FIELD / LAB / SI unit systems and raw -> SI scaling per dimension.

- builders: Row-based constructors (make_keyword, make_deck) driven by keyword layouts.

- errors:   DeckError for model misuse (shares the ConfigError base).
"""

from .errors import DeckError
from .units import UnitSystem, get_unit_system
from .items import DeckItem, DeckRecord, DeckKeyword
from .deck import Deck, Section, SECTION_NAMES
from .builders import LAYOUTS, make_record, make_keyword, make_deck

__all__ = [
    "DeckError",
    "UnitSystem", "get_unit_system",
    "DeckItem", "DeckRecord", "DeckKeyword",
    "Deck", "Section", "SECTION_NAMES",
    "LAYOUTS", "make_record", "make_keyword", "make_deck",
]
