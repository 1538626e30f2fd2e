# -*- coding: utf-8 -*-
# Resxus/deck/errors.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/12/2026

Purpose
-------
Error type for misuse of the in-memory deck model (bad item access, missing sections,
unknown units). Shares the `ConfigError` base so callers can catch one family.
"""

from common.errors import ConfigError

__all__ = ["DeckError"]


class DeckError(ConfigError):
    """
    Raised by the deck model:
      - typed access to a defaulted or out-of-range item slot
      - wrong value type for the requested accessor
      - unknown item / keyword / section names
      - unknown unit system or dimension
    """
