"""Exception hierarchy for the Diophantine search package."""
from __future__ import annotations

__all__ = ["DiophantineError", "InvalidEquation", "InvalidConfiguration"]


class DiophantineError(Exception):
    """Base class for every error raised by :mod:`diophantine_search`."""


class InvalidEquation(DiophantineError, ValueError):
    """Raised when ``A·x^n + B = C·y^m + D`` has a non-positive A, C, n or m."""


class InvalidConfiguration(DiophantineError, ValueError):
    """Raised when a search or filter option is outside its valid domain."""
