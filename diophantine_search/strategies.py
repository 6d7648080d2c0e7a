"""Strategy interface and the default filter → search pipeline.

Strategies are small objects with a ``name`` and a single entry point that
takes an :class:`~diophantine_search.equation.Equation`. They are run in
order, cheapest first: Bézout, then the modulus filter, then the bounded
trial search.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

from .bezout import BezoutFilter
from .config import ModuliConfig, SearchConfig
from .equation import Equation
from .moduli import ModulusFilter
from .search import SearchOutcome, TrialSearch

__all__ = [
    "Strategy",
    "Exploration",
    "explore",
    "sweep",
    "VERDICT_BEZOUT",
    "VERDICT_MODULUS",
    "VERDICT_SOLUTIONS",
    "VERDICT_NONE_UP_TO_LIMIT",
    "VERDICT_CANCELLED",
]

logger = logging.getLogger(__name__)

VERDICT_BEZOUT = "bezout"
VERDICT_MODULUS = "modulus"
VERDICT_SOLUTIONS = "solutions"
VERDICT_NONE_UP_TO_LIMIT = "none-up-to-limit"
VERDICT_CANCELLED = "cancelled"


class Strategy(Protocol):
    """Protocol for necessary-condition filters."""

    name: str

    def is_possible(self, equation: Equation) -> bool:  # pragma: no cover - interface
        ...


@dataclass(slots=True)
class Exploration:
    """Everything learned about one equation."""

    equation: Equation
    bezout_ok: bool
    obstruction: int | None = None
    outcome: SearchOutcome | None = None

    @property
    def verdict(self) -> str:
        if not self.bezout_ok:
            return VERDICT_BEZOUT
        if self.obstruction is not None:
            return VERDICT_MODULUS
        if self.outcome is not None and self.outcome.found:
            return VERDICT_SOLUTIONS
        if self.outcome is not None and self.outcome.cancelled:
            return VERDICT_CANCELLED
        return VERDICT_NONE_UP_TO_LIMIT

    @property
    def disproved(self) -> bool:
        return self.verdict in (VERDICT_BEZOUT, VERDICT_MODULUS)


def explore(
    equation: Equation,
    *,
    moduli_config: ModuliConfig | None = None,
    search_config: SearchConfig | None = None,
    should_stop: Callable[[], bool] | None = None,
    bezout_verbose: bool | None = None,
) -> Exploration:
    """Run Bézout, the modulus filter and, if both pass, the trial search.

    ``bezout_verbose`` controls logging of a Bézout rejection; it defaults to
    ``moduli_config.verbose``.
    """
    moduli_config = moduli_config or ModuliConfig()
    search_config = search_config or SearchConfig()

    if bezout_verbose is None:
        bezout_verbose = moduli_config.verbose
    bezout: Strategy = BezoutFilter(verbose=bezout_verbose)
    if not bezout.is_possible(equation):
        return Exploration(equation, bezout_ok=False)

    moduli = ModulusFilter(moduli_config)
    if not moduli.is_possible(equation):
        return Exploration(equation, bezout_ok=True, obstruction=moduli.obstruction)

    search = TrialSearch(equation, search_config)
    outcome = search.run(should_stop=should_stop)
    return Exploration(equation, bezout_ok=True, outcome=outcome)


def sweep(
    equations: Iterable[Equation],
    *,
    moduli_config: ModuliConfig | None = None,
    search_config: SearchConfig | None = None,
) -> list[Exploration]:
    """:func:`explore` each equation independently, in order."""
    results: list[Exploration] = []
    for equation in equations:
        result = explore(equation, moduli_config=moduli_config, search_config=search_config)
        logger.debug("%s -> %s", equation.coefficients, result.verdict)
        results.append(result)
    return results
