# -*- coding: utf-8 -*-
# Resxus/simconfig/errors.py


"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/14/2026

Purpose
-------
Provide typed exceptions for the simulation-configuration layer with compact,
context-aware messages, so every construction failure names its cause and the
offending values (keyword, region ids, grid property).

Main Tasks
----------
    1. Re-export the shared ConfigError base (common.errors).
    2. Provide one subclass per failure cause of threshold-pressure construction/queries.

Notes
-----
- UnsupportedFeatureError is also a NotImplementedError (a gap in the code, not bad data);
  UnresolvedValueError is also a ValueError (bad query argument).
"""

from common.errors import ConfigError

__all__ = [
    "ConfigError",
    "UnsupportedFeatureError",
    "InconsistentConfigError",
    "MissingDependencyError",
    "InvalidRegionDataError",
    "MalformedRecordError",
    "OutOfRangeReferenceError",
    "UnresolvedValueError",
]


class UnsupportedFeatureError(ConfigError, NotImplementedError):
    """
    An option variant was requested that is not implemented:
      - EQLOPTS IRREVERS (irreversible threshold pressures)
      - unknown EQLOPTS tokens when strict option checking is enabled
    """


class InconsistentConfigError(ConfigError):
    """
    Sections disagree: EQLOPTS THPRES is set in RUNSPEC but SOLUTION has no THPRES keyword.
    """


class MissingDependencyError(ConfigError):
    """
    Threshold pressures are active but the region grid property (EQLNUM) is not available.
    """


class InvalidRegionDataError(ConfigError):
    """
    The region grid is present but degenerate (every cell value is 0).
    """


class MalformedRecordError(ConfigError):
    """
    A THPRES record omits REGION1 or REGION2.
    """


class OutOfRangeReferenceError(ConfigError):
    """
    A THPRES record references a region id above the maximum found in the region grid.
    """


class UnresolvedValueError(ConfigError, ValueError):
    """
    A pressure was requested for a region pair whose barrier was declared without a value.
    """
