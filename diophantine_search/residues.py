"""Screening table of residues reachable by the left side of an equation."""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .equation import Equation

__all__ = ["ResidueTable"]

logger = logging.getLogger(__name__)


class ResidueTable:
    """Boolean table ``reachable[k_idx, r]`` for a fixed list of screening moduli.

    ``reachable[k_idx, r]`` is true when ``left(x) ≡ r (mod moduli[k_idx])``
    for some x in ``[0, moduli[k_idx])``. Rows are padded to the largest
    modulus; padding cells stay false and are never indexed.
    """

    def __init__(self, equation: Equation, moduli: Sequence[int]) -> None:
        self.moduli: tuple[int, ...] = tuple(moduli)
        self.reachable = np.zeros((len(self.moduli), max(self.moduli)), dtype=bool)
        for idx, k in enumerate(self.moduli):
            for x in range(k):
                self.reachable[idx, equation.left_mod(x, k)] = True
        logger.debug(
            "Residue table built for moduli %s: %s",
            self.moduli,
            ", ".join(f"{k}:{n}" for k, n in self.coverage()),
        )

    def can_match(self, value: int) -> bool:
        """``False`` if ``value`` hits an unreachable residue for any screening modulus."""
        for idx, k in enumerate(self.moduli):
            if not self.reachable[idx, value % k]:
                return False
        return True

    def coverage(self) -> list[tuple[int, int]]:
        """Pairs ``(modulus, number of reachable residues)``."""
        return [
            (k, int(np.count_nonzero(self.reachable[idx, :k])))
            for idx, k in enumerate(self.moduli)
        ]
