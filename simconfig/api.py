# -*- coding: utf-8 -*-
# Resxus/simconfig/api.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/16/2026 (Updated: 10/18/2026)

Purpose
-------
High-level entry points for the deck -> simulation-configuration step: build a
`SimulationConfig` with logging around the outcome, and condense it into a plain
dict summary suitable for logs, JSON or reports.

Main Tasks
----------
    1. build_simulation_config: construct, log success, log and re-raise failures.
    2. summarize: flags, barrier counts, region bound and barrier rows.

Notes
-----
- Failures are never swallowed; the caller decides whether to abort the run.
"""

import logging
from typing import Any, Dict, Optional

from .errors import ConfigError
from .simulation_config import SimulationConfig

__all__ = ["build_simulation_config", "summarize"]

logger = logging.getLogger(__name__)


def build_simulation_config(deck, grid_properties=None,
                            settings: Optional[Dict[str, Any]] = None) -> SimulationConfig:
    """
    Build and validate a `SimulationConfig`.

    Args
    ----
    deck : Deck
        Parsed deck.
    grid_properties : GridProperties, optional
        Integer grid properties (EQLNUM needed only if threshold pressures are active).
    settings : dict, optional
        Overrides for `simconfig.settings.DEFAULTS`.

    Returns
    -------
    SimulationConfig

    Raises
    ------
    ConfigError
        Any construction failure (logged at ERROR level before propagating).
    """
    try:
        cfg = SimulationConfig(deck, grid_properties, settings)
    except ConfigError as e:
        logger.error("Cannot build simulation configuration: %s", e)
        raise

    tp = cfg.threshold_pressure
    logger.info(
        "Simulation configuration built (THPRES pairs=%d, DISGAS=%s, VAPOIL=%s, CPR=%s).",
        tp.size(), cfg.has_disgas(), cfg.has_vapoil(), cfg.use_cpr(),
    )
    return cfg


def summarize(sim_config: SimulationConfig) -> Dict[str, Any]:
    """
    Return a JSON-friendly summary of `sim_config`.

    Returns
    -------
    dict
        {
          "flags": {"thpres": bool, "disgas": bool, "vapoil": bool, "cpr": bool},
          "threshold_pressure": {
              "n_pairs": int, "n_valued": int, "n_unvalued": int,
              "max_region": int, "barriers": [row, ...]
          }
        }
    """
    tp = sim_config.threshold_pressure
    rows = tp.as_records()
    n_valued = sum(1 for r in rows if r["has_value"])
    return {
        "flags": {
            "thpres": sim_config.has_threshold_pressure(),
            "disgas": sim_config.has_disgas(),
            "vapoil": sim_config.has_vapoil(),
            "cpr": sim_config.use_cpr(),
        },
        "threshold_pressure": {
            "n_pairs": tp.size(),
            "n_valued": n_valued,
            "n_unvalued": len(rows) - n_valued,
            "max_region": tp.max_region,
            "barriers": rows,
        },
    }
