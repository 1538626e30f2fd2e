"""
Tests for the SimulationConfig owner, the build API and settings resolution.
"""

import logging

import pytest

from deck import make_deck
from simconfig import (
    DEFAULTS,
    ConfigError,
    InconsistentConfigError,
    SimulationConfig,
    build_simulation_config,
    resolve_settings,
    summarize,
)


class TestSimulationConfig:

    def test_flags(self, make_thpres_deck, five_regions):
        deck = make_thpres_deck(rows=[(1, 2, 1.0)], runspec_extra={"DISGAS": None, "CPR": None})
        cfg = SimulationConfig(deck, five_regions)
        assert cfg.has_threshold_pressure()
        assert cfg.has_disgas()
        assert not cfg.has_vapoil()
        assert cfg.use_cpr()

    def test_no_runspec(self):
        cfg = SimulationConfig(make_deck({"SOLUTION": {}}))
        assert not cfg.has_threshold_pressure()
        assert not cfg.has_disgas()
        assert not cfg.has_vapoil()
        assert not cfg.use_cpr()

    def test_inactive_threshold_pressure(self, make_thpres_deck):
        cfg = SimulationConfig(make_thpres_deck(rows=None, options=None, runspec_extra={"VAPOIL": None}))
        assert not cfg.has_threshold_pressure()
        assert cfg.has_vapoil()


class TestBuildApi:

    def test_build_and_summarize(self, make_thpres_deck, five_regions):
        deck = make_thpres_deck(rows=[(2, 1, 3.0), (4, 3)])
        cfg = build_simulation_config(deck, five_regions)
        s = summarize(cfg)
        assert s["flags"] == {"thpres": True, "disgas": False, "vapoil": False, "cpr": False}
        tp = s["threshold_pressure"]
        assert tp["n_pairs"] == 2
        assert tp["n_valued"] == 1
        assert tp["n_unvalued"] == 1
        assert tp["max_region"] == 5
        assert tp["barriers"][0] == {"region1": 1, "region2": 2, "has_value": True, "pressure": 3.0}

    def test_failure_logged_and_raised(self, make_thpres_deck, five_regions, caplog):
        deck = make_thpres_deck(rows=None)
        with caplog.at_level(logging.ERROR, logger="simconfig.api"):
            with pytest.raises(InconsistentConfigError):
                build_simulation_config(deck, five_regions)
        assert "Cannot build simulation configuration" in caplog.text


class TestSettings:

    def test_defaults_not_mutated(self):
        merged = resolve_settings({"options": {"strict": True}})
        assert merged["options"]["strict"] is True
        assert merged["regions"]["property"] == "EQLNUM"
        assert DEFAULTS["options"]["strict"] is False

    def test_none_gives_copy(self):
        merged = resolve_settings(None)
        assert merged == DEFAULTS
        merged["keywords"]["thpres"] = "X"
        assert DEFAULTS["keywords"]["thpres"] == "THPRES"

    def test_unknown_section(self):
        with pytest.raises(ConfigError) as exc:
            resolve_settings({"thresholds": {}})
        assert "thresholds" in str(exc.value)

    def test_unknown_nested_key(self):
        with pytest.raises(ConfigError) as exc:
            resolve_settings({"options": {"strcit": True}})
        assert "options.strcit" in str(exc.value)
        assert "strict" in str(exc.value)

    def test_known_nested_key_accepted(self):
        merged = resolve_settings({"regions": {"property": "FIPNUM"}})
        assert merged["regions"]["property"] == "FIPNUM"


class TestErrorFormatting:

    def test_context_suffix(self):
        err = ConfigError("boom", {"region1": 4, "keyword": "THPRES"})
        assert str(err) == "boom | keyword='THPRES', region1=4"

    def test_long_context_truncated(self):
        err = ConfigError("boom", {"data": "x" * 500})
        assert str(err).endswith("...")
        assert len(str(err)) < 200

    def test_no_context(self):
        assert str(ConfigError("plain")) == "plain"
