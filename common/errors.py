# -*- coding: utf-8 -*-
# Resxus/common/errors.py

"""
Project: Resxus
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Base exception for every Resxus layer, with a compact context suffix in its string
form. Lives below both `deck` and `simconfig` so neither depends on the other.

Notes
-----
- Context is optional; long values are truncated for readability.
"""

__all__ = ["ConfigError"]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class ConfigError(Exception):
    """
    Base class for all configuration-related errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"keyword": "THPRES", "region1": 4}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(ConfigError, self).__init__(message)

    def __str__(self):
        base = super(ConfigError, self).__str__()
        return base + _format_context(self.context)
