# -*- coding: utf-8 -*-
# Resxus/common/__init__.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/19/2026

Modules:
--------
- errors: ConfigError base (message + compact context suffix) shared by the deck model
          and the simulation-configuration layer.
"""

from .errors import ConfigError

__all__ = ["ConfigError"]
