# -*- coding: utf-8 -*-
# Resxus/post/__init__.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/17/2026

Modules:
--------
- export:        Threshold-pressure table and summary writers (CSV, JSON, Excel via pandas).

- plot_barriers: Dense region-pair matrix of the table and a headless-safe matplotlib heatmap.
"""

__all__ = ["export", "plot_barriers"]
