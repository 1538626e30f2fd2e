# -*- coding: utf-8 -*-
# Resxus/simconfig/threshold_pressure.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/15/2026 (Updated: 10/17/2026)

Purpose
-------
Internalize the SOLUTION THPRES keyword into a symmetric region-pair table of threshold
pressures, validated against the RUNSPEC EQLOPTS option and the EQLNUM region grid.

Main Tasks
----------
    1. Require RUNSPEC and SOLUTION; otherwise the table is empty (feature inactive).
    2. Scan EQLOPTS (IRREVERS rejected, THPRES enables the feature).
    3. Cross-check option vs. keyword presence (option without keyword is an error).
    4. Derive the region bound as max(EQLNUM); reject a missing or all-zero grid.
    5. Ingest THPRES records into {RegionPair: Barrier}; last record per pair wins.
    6. Serve read-only queries: has_region_barrier, has_threshold_pressure,
       get_threshold_pressure, size.

Notes
-----
- Construction either completes with a fully validated table or raises a ConfigError
  subclass; there is no partially filled state.
- Keyword present without the option leaves the table empty (not an error).
- Pressures are stored in SI (Pa), converted from the deck's unit system.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import (
    InconsistentConfigError,
    InvalidRegionDataError,
    MalformedRecordError,
    MissingDependencyError,
    OutOfRangeReferenceError,
    UnresolvedValueError,
)
from .options import EqlOptions, scan_eqlopts
from .regions import Barrier, RegionPair, UnvaluedBarrier, ValuedBarrier
from .settings import resolve_settings

__all__ = ["ThresholdPressure"]

logger = logging.getLogger(__name__)


class ThresholdPressure:
    """
    Symmetric threshold-pressure table built from a parsed deck.

    Parameters
    ----------
    deck : Deck
        Parsed deck answering `has_section(name)` / `get_section(name)`.
    grid_properties : GridProperties, optional
        Provider of integer grid properties (EQLNUM); only consulted when the
        feature is active.
    settings : dict, optional
        Overrides for `simconfig.settings.DEFAULTS`.

    Raises
    ------
    UnsupportedFeatureError, InconsistentConfigError, MissingDependencyError,
    InvalidRegionDataError, MalformedRecordError, OutOfRangeReferenceError
        See `simconfig.errors`; each aborts construction.
    """

    def __init__(self, deck, grid_properties=None, settings: Optional[Dict[str, Any]] = None):
        self._settings = resolve_settings(settings)
        self._table: Dict[RegionPair, Barrier] = {}
        self._max_region = 0
        self.options = EqlOptions()

        if not (deck.has_section("RUNSPEC") and deck.has_section("SOLUTION")):
            logger.debug("No RUNSPEC/SOLUTION section; threshold pressures inactive.")
            return

        runspec = deck.get_section("RUNSPEC")
        solution = deck.get_section("SOLUTION")
        kw_name = self._settings["keywords"]["thpres"]

        self.options = scan_eqlopts(
            runspec,
            keyword=self._settings["keywords"]["options"],
            strict=bool(self._settings["options"]["strict"]),
        )
        has_keyword = solution.has_keyword(kw_name)
        self._check_consistency(self.options.thpres, has_keyword)

        if not (self.options.thpres and has_keyword):
            if has_keyword:
                logger.debug("%s present but EQLOPTS THPRES not set; keyword ignored.", kw_name)
            return

        self._max_region = self._region_bound(grid_properties)
        self._ingest(solution.get_keyword(kw_name))
        logger.info(
            "Threshold pressures: %d region pair(s), max region %d.",
            len(self._table), self._max_region,
        )

    # --------------------
    # Validation pipeline
    # --------------------
    def _check_consistency(self, option: bool, has_keyword: bool) -> None:
        if option and not has_keyword:
            raise InconsistentConfigError(
                "Invalid solution section; the EQLOPTS THPRES option is set in RUNSPEC, "
                "but no THPRES keyword is found in SOLUTION.",
                {"keyword": self._settings["keywords"]["thpres"]},
            )

    def _region_bound(self, grid_properties) -> int:
        """Return max(region property); the property must exist and be nonzero somewhere."""
        prop_name = self._settings["regions"]["property"]
        if grid_properties is None or not grid_properties.has_int_grid_property(prop_name):
            raise MissingDependencyError(
                "Error when internalizing THPRES: {} keyword not found in deck".format(prop_name),
                {"property": prop_name},
            )

        prop = grid_properties.get_int_grid_property(prop_name)
        max_region = prop.max_value()
        if max_region == 0:
            raise InvalidRegionDataError(
                "Error in {} data: all values are 0".format(prop_name),
                {"property": prop_name, "n_cells": len(prop)},
            )
        return max_region

    def _ingest(self, keyword) -> None:
        for index, rec in enumerate(keyword):
            region1 = rec.get_item("REGION1")
            region2 = rec.get_item("REGION2")
            value = rec.get_item("VALUE")

            if not region1.has_value(0) or not region2.has_value(0):
                raise MalformedRecordError(
                    "Missing region data for use of the THPRES keyword",
                    {"record": index},
                )

            r1 = region1.get_int(0)
            r2 = region2.get_int(0)
            if r1 > self._max_region or r2 > self._max_region:
                raise OutOfRangeReferenceError(
                    "Too high region numbers in THPRES keyword",
                    {"record": index, "region1": r1, "region2": r2, "max_region": self._max_region},
                )

            if value.has_value(0):
                self._add_barrier(r1, r2, ValuedBarrier(value.get_si_double(0)))
            else:
                self._add_barrier(r1, r2, UnvaluedBarrier())

    def _add_barrier(self, r1: int, r2: int, barrier: Barrier) -> None:
        key = RegionPair.of(r1, r2)
        if key in self._table:
            logger.debug("THPRES regions (%d, %d) redefined; later record wins.", key.first, key.second)
        self._table[key] = barrier

    # --------------------
    # Queries
    # --------------------
    @property
    def max_region(self) -> int:
        return self._max_region

    def has_region_barrier(self, r1: int, r2: int) -> bool:
        return RegionPair.of(r1, r2) in self._table

    def has_threshold_pressure(self, r1: int, r2: int) -> bool:
        barrier = self._table.get(RegionPair.of(r1, r2))
        return barrier is not None and barrier.has_value

    def get_threshold_pressure(self, r1: int, r2: int) -> float:
        """
        Pressure [Pa] for the region pair.

        Returns 0.0 when no barrier is configured between the regions.

        Raises
        ------
        UnresolvedValueError
            If a barrier is declared for the pair but no value was given.
        """
        barrier = self._table.get(RegionPair.of(r1, r2))
        if barrier is None:
            return 0.0
        if isinstance(barrier, ValuedBarrier):
            return barrier.pressure
        raise UnresolvedValueError(
            "The THPRES value for regions {} and {} has not been initialized.".format(r1, r2),
            {"region1": r1, "region2": r2},
        )

    def size(self) -> int:
        return len(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def items(self) -> Iterator[Tuple[RegionPair, Barrier]]:
        for key in sorted(self._table):
            yield key, self._table[key]

    def as_records(self) -> List[Dict[str, Any]]:
        """Flat rows (region1, region2, has_value, pressure) in ascending pair order."""
        rows = []
        for key, barrier in self.items():
            rows.append({
                "region1": key.first,
                "region2": key.second,
                "has_value": barrier.has_value,
                "pressure": barrier.pressure if isinstance(barrier, ValuedBarrier) else None,
            })
        return rows
