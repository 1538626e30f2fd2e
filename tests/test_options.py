"""
Tests for the EQLOPTS option scan.
"""

import pytest

from deck import make_deck
from simconfig.options import EqlOptions, scan_eqlopts
from simconfig.errors import UnsupportedFeatureError


def _runspec(*tokens):
    sections = {"RUNSPEC": {"EQLOPTS": [list(tokens)]}} if tokens else {"RUNSPEC": {}}
    return make_deck(sections).get_section("RUNSPEC")


class TestScanEqlopts:

    def test_absent_keyword(self):
        assert scan_eqlopts(_runspec()) == EqlOptions()

    def test_keyword_without_records(self):
        runspec = make_deck({"RUNSPEC": {"EQLOPTS": None}}).get_section("RUNSPEC")
        assert runspec.has_keyword("EQLOPTS")
        assert scan_eqlopts(runspec) == EqlOptions()

    def test_thpres(self):
        opts = scan_eqlopts(_runspec("THPRES"))
        assert opts.thpres and not opts.mobile and not opts.quiesc

    def test_defaulted_slots_skipped(self):
        opts = scan_eqlopts(_runspec(None, "QUIESC", None, "THPRES"))
        assert opts == EqlOptions(thpres=True, quiesc=True)

    def test_irrevers(self):
        with pytest.raises(UnsupportedFeatureError, match="IRREVERS"):
            scan_eqlopts(_runspec("THPRES", "IRREVERS"))

    def test_unknown_token_ignored(self, caplog):
        with caplog.at_level("WARNING", logger="simconfig.options"):
            opts = scan_eqlopts(_runspec("NOPE", "MOBILE"))
        assert opts == EqlOptions(mobile=True)
        assert "NOPE" in caplog.text

    def test_unknown_token_strict(self):
        with pytest.raises(UnsupportedFeatureError):
            scan_eqlopts(_runspec("NOPE"), strict=True)
