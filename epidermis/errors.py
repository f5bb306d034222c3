"""Error types raised by the epidermis simulation."""

from __future__ import annotations


class InvalidRange(ValueError):
    """Spatial bound is malformed (min_bound >= max_bound)."""


class InvalidCount(ValueError):
    """Requested cell count is negative."""


class DivisionError(RuntimeError):
    """The division primitive failed to produce a daughter cell."""
