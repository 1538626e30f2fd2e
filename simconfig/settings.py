# -*- coding: utf-8 -*-
# Resxus/simconfig/settings.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/14/2026

Purpose:
--------
Default policy for building simulation configuration, plus a non-mutating deep merge
for caller overrides.

Settings Schema:
----------------
{
  "options":  {"strict": bool},            # reject unknown EQLOPTS tokens
  "regions":  {"property": str},           # region grid property name
  "keywords": {"options": str, "thpres": str}
}
"""

from typing import Any, Dict, Optional
import copy

from .errors import ConfigError

__all__ = ["DEFAULTS", "resolve_settings"]


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "options": {
        "strict": False,        # unknown EQLOPTS tokens are ignored (with a warning)
    },
    "regions": {
        "property": "EQLNUM",
    },
    "keywords": {
        "options": "EQLOPTS",
        "thpres": "THPRES",
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _check_known(base: Dict[str, Any], upd: Dict[str, Any], path: str) -> None:
    """Reject override keys that do not exist in `base` (recursing into nested dicts)."""
    unknown = sorted(str(k) for k in upd if k not in base)
    if unknown:
        raise ConfigError(
            "Unknown settings key(s): {}".format(", ".join(path + k for k in unknown)),
            {"allowed": sorted(base)},
        )
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(base[k], dict):
            _check_known(base[k], v, path + str(k) + ".")


def resolve_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge `overrides` over `DEFAULTS`.

    Raises
    ------
    ConfigError
        If `overrides` has a section or key unknown to `DEFAULTS`.
    """
    _check_known(DEFAULTS, overrides or {}, "")
    return _deep_merge(DEFAULTS, overrides or {})
