"""
Shared fixtures for the Resxus test suite.

Decks are built from plain rows through `deck.make_deck`; region grids through
`grid.GridProperties`.
"""

import numpy as np
import pytest

from deck import make_deck
from grid import GridProperties


def thpres_deck(rows, options=(("THPRES",),), unit_system="SI", runspec_extra=None):
    """RUNSPEC with EQLOPTS rows + SOLUTION with THPRES rows (None -> keyword omitted)."""
    runspec = dict(runspec_extra or {})
    if options is not None:
        runspec["EQLOPTS"] = [list(o) for o in options]
    solution = {}
    if rows is not None:
        solution["THPRES"] = [list(r) for r in rows]
    return make_deck({"RUNSPEC": runspec, "SOLUTION": solution}, unit_system=unit_system)


@pytest.fixture
def make_thpres_deck():
    return thpres_deck


@pytest.fixture
def eqlnum_props():
    """Factory: GridProperties holding EQLNUM with the given cell values."""
    def _make(values):
        return GridProperties({"EQLNUM": np.asarray(values, dtype=int)})
    return _make


@pytest.fixture
def five_regions(eqlnum_props):
    return eqlnum_props([1, 1, 2, 3, 3, 4, 5, 5, 0])
