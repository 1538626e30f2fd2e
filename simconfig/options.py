# -*- coding: utf-8 -*-
# Resxus/simconfig/options.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/15/2026

Purpose
-------
Scan the RUNSPEC equilibration-options keyword (EQLOPTS) into a small flag set.
Only the first record is read; every item holding a value is one option token.

Main Tasks
----------
    1. Reject the unimplemented IRREVERS variant with UnsupportedFeatureError.
    2. Record THPRES / MOBILE / QUIESC flags.
    3. Ignore (warn about) unknown tokens, or reject them when `strict=True`.

Notes
-----
- Tokens are matched exactly as written (upper case, as the deck parser emits them).
- A RUNSPEC without EQLOPTS, or an EQLOPTS with no record, yields all flags False.
"""

from dataclasses import dataclass
import logging

from .errors import UnsupportedFeatureError

__all__ = ["EqlOptions", "scan_eqlopts", "KNOWN_OPTIONS"]

logger = logging.getLogger(__name__)

KNOWN_OPTIONS = ("THPRES", "MOBILE", "QUIESC", "IRREVERS")


@dataclass(frozen=True)
class EqlOptions:
    thpres: bool = False
    mobile: bool = False
    quiesc: bool = False


def scan_eqlopts(runspec, keyword: str = "EQLOPTS", strict: bool = False) -> EqlOptions:
    """
    Read option tokens from `keyword` in the RUNSPEC section.

    Args
    ----
    runspec : Section-like
        Object with `has_keyword(name)` / `get_keyword(name)`.
    keyword : str
        Options keyword name.
    strict : bool
        If True, unknown tokens raise instead of being ignored.

    Returns
    -------
    EqlOptions

    Raises
    ------
    UnsupportedFeatureError
        On IRREVERS, or on an unknown token in strict mode.
    """
    if not runspec.has_keyword(keyword):
        return EqlOptions()

    kw = runspec.get_keyword(keyword)
    if len(kw) == 0:
        return EqlOptions()

    flags = {"thpres": False, "mobile": False, "quiesc": False}
    record = kw.get_record(0)
    for item in record:
        if not item.has_value(0):
            continue

        opt = item.get_string(0)
        if opt == "IRREVERS":
            raise UnsupportedFeatureError(
                "Cannot use IRREVERS version of THPRES option, not implemented",
                {"keyword": keyword, "option": opt},
            )
        if opt in ("THPRES", "MOBILE", "QUIESC"):
            flags[opt.lower()] = True
        elif strict:
            raise UnsupportedFeatureError(
                "Unknown {} option {!r}".format(keyword, opt),
                {"keyword": keyword, "known": list(KNOWN_OPTIONS)},
            )
        else:
            logger.warning("Ignoring unknown %s option %r", keyword, opt)

    return EqlOptions(**flags)
