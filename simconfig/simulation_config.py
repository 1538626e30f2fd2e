# -*- coding: utf-8 -*-
# Resxus/simconfig/simulation_config.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/16/2026

Purpose
-------
Owner object for simulator-level settings derived from the deck: the threshold-pressure
table plus RUNSPEC flag keywords (dissolved gas, vaporized oil, CPR preconditioner).
"""

from typing import Any, Dict, Optional

from .threshold_pressure import ThresholdPressure

__all__ = ["SimulationConfig"]


class SimulationConfig:
    """
    Simulation settings built from a parsed deck and its grid properties.

    Attributes
    ----------
    threshold_pressure : ThresholdPressure
        Region-pair threshold pressures (empty when the feature is inactive).
    """

    def __init__(self, deck, grid_properties=None, settings: Optional[Dict[str, Any]] = None):
        self.threshold_pressure = ThresholdPressure(deck, grid_properties, settings)

        runspec = deck.get_section("RUNSPEC") if deck.has_section("RUNSPEC") else None
        self._disgas = runspec is not None and runspec.has_keyword("DISGAS")
        self._vapoil = runspec is not None and runspec.has_keyword("VAPOIL")
        self._cpr = runspec is not None and runspec.has_keyword("CPR")

    def has_threshold_pressure(self) -> bool:
        return self.threshold_pressure.size() > 0

    def has_disgas(self) -> bool:
        return self._disgas

    def has_vapoil(self) -> bool:
        return self._vapoil

    def use_cpr(self) -> bool:
        return self._cpr
