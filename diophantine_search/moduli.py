"""Modulus necessity filter.

For each modulus ``i`` the residues reachable by ``A·x^n + B`` (x in
``[0, i)``) and by ``C·y^m + D`` (y in ``[0, i)``) are compared. Any modulus
where the two residue sets are disjoint proves that the equation has no
integer solution. Passing every modulus proves nothing: it only means the
equation is not ruled out by this test.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace

import numpy as np
from sympy import isprime

from . import constants as C
from .config import ModuliConfig
from .equation import Equation

__all__ = [
    "ModulusReport",
    "left_residues",
    "right_residues",
    "analyze_modulus",
    "find_obstruction",
    "modulus_possible",
    "ModulusFilter",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ModulusReport:
    """Residue sets of both sides of an equation modulo ``modulus``."""

    modulus: int
    left: frozenset[int]
    right: frozenset[int]
    skipped: bool = False

    @property
    def common(self) -> frozenset[int]:
        return self.left & self.right

    @property
    def possible(self) -> bool:
        return self.skipped or bool(self.common)


def left_residues(equation: Equation, modulus: int) -> np.ndarray:
    """Boolean mask of residues attained by ``left(x) mod modulus``."""
    mask = np.zeros(modulus, dtype=bool)
    for x in range(modulus):
        mask[equation.left_mod(x, modulus)] = True
    return mask


def right_residues(equation: Equation, modulus: int) -> np.ndarray:
    """Boolean mask of residues attained by ``right(y) mod modulus``."""
    mask = np.zeros(modulus, dtype=bool)
    for y in range(modulus):
        mask[equation.right_mod(y, modulus)] = True
    return mask


def _masks_intersect(left: np.ndarray, right: np.ndarray) -> bool:
    return bool(np.any(left & right))


def analyze_modulus(equation: Equation, modulus: int, *, only_prime: bool = False) -> ModulusReport:
    """Compute both residue sets modulo ``modulus``.

    With ``only_prime`` a composite modulus is skipped and reported as
    passing.
    """
    if only_prime and not isprime(modulus):
        return ModulusReport(modulus, frozenset(), frozenset(), skipped=True)
    left = left_residues(equation, modulus)
    right = right_residues(equation, modulus)
    return ModulusReport(
        modulus,
        frozenset(int(r) for r in np.flatnonzero(left)),
        frozenset(int(r) for r in np.flatnonzero(right)),
    )


def _modulus_disproves(equation: Equation, modulus: int, only_prime: bool) -> bool:
    if only_prime and not isprime(modulus):
        return False
    return not _masks_intersect(left_residues(equation, modulus), right_residues(equation, modulus))


def find_obstruction(
    equation: Equation,
    max_modulus: int = C.DEFAULT_MAX_MODULUS,
    *,
    only_prime: bool = False,
) -> int | None:
    """Return the smallest modulus in ``[2, max_modulus)`` that disproves solvability."""
    for i in range(2, max_modulus):
        if _modulus_disproves(equation, i, only_prime):
            return i
    return None


def modulus_possible(
    equation: Equation,
    max_modulus: int = C.DEFAULT_MAX_MODULUS,
    *,
    only_prime: bool = False,
) -> bool:
    """``True`` unless some tested modulus separates the two sides."""
    return find_obstruction(equation, max_modulus, only_prime=only_prime) is None


class ModulusFilter:
    """Strategy object running :func:`find_obstruction` under a :class:`ModuliConfig`.

    The last disproving modulus and the elapsed wall time of the last check
    are kept for reporting.
    """

    name = "moduli"

    def __init__(self, config: ModuliConfig | None = None) -> None:
        self.config = replace(config) if config is not None else ModuliConfig()
        self.obstruction: int | None = None
        self.elapsed: float = 0.0

    def set_max_modulus(self, max_modulus: int) -> None:
        self.config = replace(self.config, max_modulus=max_modulus)

    def set_only_prime(self, only_prime: bool) -> None:
        self.config.only_prime = bool(only_prime)

    def set_verbose(self, verbose: bool) -> None:
        self.config.verbose = bool(verbose)

    def is_possible(self, equation: Equation) -> bool:
        start = time.perf_counter()
        self.obstruction = find_obstruction(
            equation, self.config.max_modulus, only_prime=self.config.only_prime
        )
        self.elapsed = time.perf_counter() - start
        if self.obstruction is not None and self.config.verbose:
            logger.info("There are no solutions mod %d", self.obstruction)
        return self.obstruction is None
