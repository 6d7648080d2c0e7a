"""Bézout necessary condition: ``gcd(A, C)`` must divide ``B - D``."""
from __future__ import annotations

import logging

from sympy import igcd

from .equation import Equation

__all__ = ["bezout_possible", "BezoutFilter"]

logger = logging.getLogger(__name__)


def bezout_possible(equation: Equation) -> bool:
    """Return ``True`` when ``gcd(A, C)`` divides ``B - D``.

    Treating ``x^n`` and ``y^m`` as free integers, ``A·u - C·v = D - B`` is
    solvable only if the gcd divides the constant term.
    """
    g = igcd(equation.left_mult, equation.right_mult)
    return (equation.left_add - equation.right_add) % g == 0


class BezoutFilter:
    """Strategy wrapper around :func:`bezout_possible` with optional logging."""

    name = "bezout"

    def __init__(self, *, verbose: bool = True) -> None:
        self.verbose = verbose

    def is_possible(self, equation: Equation) -> bool:
        ok = bezout_possible(equation)
        if not ok and self.verbose:
            logger.info("No solutions by Bezout's identity")
        return ok
