# -*- coding: utf-8 -*-
# Resxus/simconfig/__init__.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/16/2026

Modules:
--------
- threshold_pressure: THPRES internalization into a symmetric region-pair table.
                      Order of ops: sections -> EQLOPTS -> consistency -> EQLNUM bound -> records.

- regions:            RegionPair (canonical unordered key) and the Valued/Unvalued barrier variants.

- options:            EQLOPTS scan; IRREVERS rejected, unknown tokens ignored unless strict.

- simulation_config:  SimulationConfig owner (threshold pressures + RUNSPEC flags).

- settings:           DEFAULTS policy and non-mutating deep merge of overrides.

- api:                build_simulation_config (logged construction) and summarize.

- errors:             ConfigError base plus one subclass per construction/query failure.
"""

from .errors import (
    ConfigError,
    UnsupportedFeatureError,
    InconsistentConfigError,
    MissingDependencyError,
    InvalidRegionDataError,
    MalformedRecordError,
    OutOfRangeReferenceError,
    UnresolvedValueError,
)
from .regions import RegionPair, ValuedBarrier, UnvaluedBarrier
from .options import EqlOptions, scan_eqlopts
from .settings import DEFAULTS, resolve_settings
from .threshold_pressure import ThresholdPressure
from .simulation_config import SimulationConfig
from .api import build_simulation_config, summarize

__all__ = [
    # Public build API
    "build_simulation_config", "summarize", "SimulationConfig", "ThresholdPressure",
    # Table types
    "RegionPair", "ValuedBarrier", "UnvaluedBarrier",
    # Options / settings
    "EqlOptions", "scan_eqlopts", "DEFAULTS", "resolve_settings",
    # Error types
    "ConfigError", "UnsupportedFeatureError", "InconsistentConfigError",
    "MissingDependencyError", "InvalidRegionDataError", "MalformedRecordError",
    "OutOfRangeReferenceError", "UnresolvedValueError",
]
