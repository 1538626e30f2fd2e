# -*- coding: utf-8 -*-
# Resxus/main.py

"""
End-to-end driver:
  1) Assemble a small parsed deck (RUNSPEC/GRID/REGIONS/SOLUTION) and an EQLNUM grid
  2) Build the simulation configuration (THPRES validated against EQLOPTS + EQLNUM)
  3) Log a summary and query a few region pairs
  4) Export the barrier table (CSV/JSON/XLSX) and plot the region-pair matrix
"""

import os
import logging
import sys

import numpy as np

from deck import make_deck
from grid import GridProperties
from simconfig import build_simulation_config, summarize, ConfigError, UnresolvedValueError
from post.export import write_barriers_csv, write_barriers_json, write_barriers_excel, write_summary_json
from post.plot_barriers import plot_barrier_matrix


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Resxus")

    out_dir = "thpres_out"
    os.makedirs(out_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Deck + region grid
    #    THPRES rows: (region1, region2, value[bar]); a missing value is defaulted
    # ------------------------------------------------------------------
    deck = make_deck(
        {
            "RUNSPEC": {"DISGAS": None, "EQLOPTS": [["THPRES"]]},
            "GRID": {},
            "REGIONS": {},
            "SOLUTION": {"THPRES": [[1, 2, 0.35], [2, 3, 0.5], [1, 3], [3, 4, 1.2]]},
        },
        unit_system="METRIC",
    )
    eqlnum = np.repeat(np.arange(1, 5), 25)  # 100 cells, regions 1..4
    props = GridProperties({"EQLNUM": eqlnum})

    # ------------------------------------------------------------------
    # 2) Build configuration (hard stop on errors)
    # ------------------------------------------------------------------
    try:
        sim_cfg = build_simulation_config(deck, props)
    except ConfigError as e:
        log.error("Aborting: %s", e)
        sys.exit(1)

    tp = sim_cfg.threshold_pressure
    summary = summarize(sim_cfg)
    log.info("Configuration summary: %s", summary["flags"])

    # ------------------------------------------------------------------
    # 3) A few queries (symmetric lookups)
    # ------------------------------------------------------------------
    for r1, r2 in [(2, 1), (3, 2), (4, 1), (3, 1)]:
        try:
            log.info("THPRES(%d,%d) = %.1f Pa", r1, r2, tp.get_threshold_pressure(r1, r2))
        except UnresolvedValueError as e:
            log.warning("%s", e)

    # ------------------------------------------------------------------
    # 4) Export + plot
    # ------------------------------------------------------------------
    csv_path = write_barriers_csv(tp, os.path.join(out_dir, "thpres.csv"))
    json_path = write_barriers_json(tp, os.path.join(out_dir, "thpres.json"))
    summary_path = write_summary_json(summary, os.path.join(out_dir, "summary.json"))
    try:
        xlsx_path = write_barriers_excel(tp, os.path.join(out_dir, "thpres.xlsx"))
    except ImportError as e:
        log.warning("Skipping Excel export: %s", e)
        xlsx_path = None

    print("Barrier table written:")
    print(" - CSV    :", csv_path)
    print(" - JSON   :", json_path)
    print(" - SUMMARY:", summary_path)
    print(" - XLSX   :", xlsx_path if xlsx_path else "(no Excel engine installed)")

    try:
        plot_barrier_matrix(tp, show=False, save_path=os.path.join(out_dir, "thpres_matrix.png"))
    except RuntimeError as e:
        log.warning("Skipping matrix plot: %s", e)
