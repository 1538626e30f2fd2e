"""
Tests for table export and the region-pair matrix plot.
"""

import csv
import json

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from simconfig import ThresholdPressure
from post.export import (
    write_barriers_csv,
    write_barriers_json,
    write_barriers_excel,
    write_summary_json,
)
from post.plot_barriers import barrier_matrix, plot_barrier_matrix


@pytest.fixture
def table(make_thpres_deck, eqlnum_props):
    deck = make_thpres_deck(rows=[(3, 1, 2.0e5), (2, 3)])
    return ThresholdPressure(deck, eqlnum_props([1, 2, 3, 3]))


class TestExport:

    def test_csv(self, table, tmp_path):
        path = write_barriers_csv(table, str(tmp_path / "out" / "thpres.csv"))
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert rows == [
            {"region1": "1", "region2": "3", "has_value": "True", "pressure": "200000.0"},
            {"region1": "2", "region2": "3", "has_value": "False", "pressure": ""},
        ]

    def test_json(self, table, tmp_path):
        path = write_barriers_json(table, str(tmp_path / "thpres.json"))
        data = json.loads(open(path, encoding="utf-8").read())
        assert data["barriers"][1] == {"region1": 2, "region2": 3, "has_value": False, "pressure": None}

    def test_summary_json_numpy_scalars(self, tmp_path):
        path = write_summary_json({"max": np.int64(3), "vals": np.arange(2)}, str(tmp_path / "s.json"))
        data = json.loads(open(path, encoding="utf-8").read())
        assert data == {"max": 3, "vals": [0, 1]}

    def test_excel(self, table, tmp_path):
        pytest.importorskip("openpyxl")
        import pandas as pd
        path = write_barriers_excel(table, str(tmp_path / "thpres.xlsx"))
        df = pd.read_excel(path, sheet_name="THPRES")
        assert list(df.columns) == ["region1", "region2", "has_value", "pressure"]
        assert len(df) == 2


class TestMatrix:

    def test_barrier_matrix(self, table):
        values, unvalued = barrier_matrix(table)
        assert values.shape == unvalued.shape == (3, 3)
        assert values[0, 2] == values[2, 0] == pytest.approx(2.0)
        assert unvalued[1, 2] and unvalued[2, 1]
        assert np.isnan(values[1, 2])
        assert np.isnan(values[0, 1]) and not unvalued[0, 1]
        assert unvalued.sum() == 2

    def test_negative_pressure_is_not_unvalued(self, make_thpres_deck, eqlnum_props):
        deck = make_thpres_deck(rows=[(1, 2, -1.0)], unit_system="METRIC")
        values, unvalued = barrier_matrix(ThresholdPressure(deck, eqlnum_props([1, 2])))
        assert values[0, 1] == values[1, 0] == pytest.approx(-1.0)
        assert not unvalued.any()

    def test_nonpositive_regions_skipped(self, make_thpres_deck, five_regions):
        deck = make_thpres_deck(rows=[(0, 2, 1.0), (-3, 1)])
        values, unvalued = barrier_matrix(ThresholdPressure(deck, five_regions))
        assert values.shape == (5, 5)
        assert np.isnan(values).all()
        assert not unvalued.any()

    def test_plot_saves(self, table, tmp_path):
        out = tmp_path / "m.png"
        fig = plot_barrier_matrix(table, show=False, save_path=str(out))
        assert out.exists()
        assert fig.axes
