"""Errors raised while configuring or generating a simulation."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when simulation parameters can never produce a graph.

    Placement and source selection sample until they succeed; when the
    parameters make success impossible (or a retry budget runs out) this
    error is reported instead of looping forever.
    """
