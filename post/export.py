# -*- coding: utf-8 -*-
# Resxus/post/export.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Export the threshold-pressure table (one row per canonical region pair) and
configuration summaries to CSV, JSON and Excel.

Main Tasks:
-----------
    1. Tabulate barrier rows: region1, region2, has_value, pressure (Pa, empty if unvalued).
    2. Write them as:
        - CSV: header + one row per pair.
        - JSON: {"barriers": [...]} or any summary dict (numpy scalars handled).
        - Excel: single-sheet file via pandas.
"""

from typing import Any, Dict, List, Optional
import os, csv, json

import numpy as np
import pandas as pd

__all__ = [
    "COLUMNS",
    "barrier_rows",
    "write_barriers_csv",
    "write_barriers_json",
    "write_barriers_excel",
    "write_summary_json",
]

COLUMNS = ["region1", "region2", "has_value", "pressure"]


# ------------------------------
# Internal helpers
# ------------------------------
def _ensure_parent(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def _json_default(o):
    """Encode numpy scalars/arrays; fall back to str for anything else."""
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def barrier_rows(table) -> List[Dict[str, Any]]:
    """
    Rows of a ThresholdPressure table (ascending pair order).

    Parameters
    ----------
    table : ThresholdPressure
        Built table.
    """
    return table.as_records()


# ------------------------------
# Public API: Writers
# ------------------------------
def write_barriers_csv(table, path: str) -> str:
    """
    Write the barrier table to CSV (unvalued barriers have an empty pressure cell).

    Returns
    -------
    str
        Written file path.
    """
    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=COLUMNS)
        w.writeheader()
        for row in barrier_rows(table):
            w.writerow({k: ("" if row[k] is None else row[k]) for k in COLUMNS})
    return path


def write_barriers_json(table, path: str, indent: int = 2) -> str:
    """Write {"barriers": rows} to a JSON file (unvalued pressure -> null)."""
    return write_summary_json({"barriers": barrier_rows(table)}, path, indent=indent)


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write any summary dictionary to a JSON file.

    Parameters
    ----------
    summary : dict
        Nested dictionary (numpy scalars allowed).
    path : str
        Output path for the JSON file.
    indent : int, optional
        Indentation level for pretty-printing (default=2).
    """
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, ensure_ascii=False, default=_json_default)
    return path


def write_barriers_excel(table, path: str, sheet_name: Optional[str] = "THPRES") -> str:
    """
    Write the barrier table to a single-sheet Excel file.

    Requires an Excel engine for pandas (e.g. openpyxl).
    """
    df = pd.DataFrame(barrier_rows(table), columns=COLUMNS)
    _ensure_parent(path)
    df.to_excel(path, index=False, sheet_name=sheet_name)
    return path
