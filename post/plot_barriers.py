# -*- coding: utf-8 -*-
# Resxus/post/plot_barriers.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Matrix view of the threshold-pressure table: a symmetric (max_region x max_region)
array and a matplotlib heatmap of it, for a quick visual check of which region pairs
carry barriers.

Main Tasks:
-----------
    1) Build the dense region-pair matrix (NaN = no barrier) and a separate unvalued-barrier mask.
    2) Provide a safe pyplot getter that works headless (sets Agg if no DISPLAY).
    3) Plot the matrix in bar, annotating unvalued pairs.

Notes:
------
- Region ids are 1-based; matrix index i holds region i+1.
- Pairs referencing region ids < 1 are not representable and are skipped.
"""

import os
from typing import Optional, Tuple
import numpy as np

__all__ = ["barrier_matrix", "plot_barrier_matrix"]


# -----------------------
# Internal utilities
# -----------------------
def _get_pyplot():
    """
    Lazy-import matplotlib.pyplot and set non-interactive backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib is unavailable.
    """
    try:
        import matplotlib
        if not os.environ.get("DISPLAY"):
            try:
                matplotlib.use("Agg")
            except Exception:
                pass
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib required: {}".format(e))


def barrier_matrix(table) -> Tuple[np.ndarray, np.ndarray]:
    """
    Dense symmetric matrix of threshold pressures plus a mask of unvalued barriers.

    Parameters
    ----------
    table : ThresholdPressure
        Built table.

    Returns
    -------
    (np.ndarray, np.ndarray)
        - values: (R, R) float array, R = table.max_region; the pressure in bar where
          valued, NaN elsewhere.
        - unvalued: (R, R) bool array, True where a barrier is declared without a value.
    """
    n = int(table.max_region)
    values = np.full((n, n), np.nan, dtype=float)
    unvalued = np.zeros((n, n), dtype=bool)
    for key, barrier in table.items():
        i, j = key.first - 1, key.second - 1
        if i < 0:
            continue
        if barrier.has_value:
            values[i, j] = values[j, i] = barrier.pressure / 1.0e5
        else:
            unvalued[i, j] = unvalued[j, i] = True
    return values, unvalued


# -----------------------
# Public plotting API
# -----------------------
def plot_barrier_matrix(table, show: bool = True, save_path: Optional[str] = None,
                        title: str = "Threshold pressures [bar]"):
    """
    Heatmap of `barrier_matrix(table)`; unvalued pairs are marked with '?'.

    Returns
    -------
    matplotlib.figure.Figure
    """
    plt = _get_pyplot()
    values, unvalued = barrier_matrix(table)
    n = values.shape[0]

    fig, ax = plt.subplots(figsize=(max(4.0, 0.5 * n + 2.0), max(3.5, 0.5 * n + 1.5)))
    im = ax.imshow(np.ma.masked_invalid(values), cmap="viridis", origin="lower")
    fig.colorbar(im, ax=ax, label="bar")

    for i, j in zip(*np.where(unvalued)):
        ax.text(j, i, "?", ha="center", va="center", color="red", fontsize=9)

    ticks = np.arange(n)
    ax.set_xticks(ticks)
    ax.set_yticks(ticks)
    ax.set_xticklabels([str(t + 1) for t in ticks])
    ax.set_yticklabels([str(t + 1) for t in ticks])
    ax.set_xlabel("Region")
    ax.set_ylabel("Region")
    ax.set_title(title)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150)
    if show:
        plt.show()
    return fig
