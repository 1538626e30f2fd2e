# -*- coding: utf-8 -*-
# Resxus/grid/__init__.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/14/2026

Modules:
--------
- properties: Integer per-cell grid properties (EQLNUM and friends) on NumPy arrays,
              and the GridProperties registry answering has/get queries.
"""

from .properties import IntGridProperty, GridProperties

__all__ = ["IntGridProperty", "GridProperties"]
