"""Bounded trial search for solutions of ``A·x^n + B = C·y^m + D``.

Every y in ``[2, limit]`` is tried in turn. ``right(y)`` is first screened
against a :class:`~diophantine_search.residues.ResidueTable`; surviving values
go through a bracketing search over x: the probe doubles until it overshoots,
then bisects the ``[low, high]`` bracket until the gap is a single step.

Both sides are strictly increasing for non-negative arguments, so the x
matching a larger y can never be smaller. The last ``low`` of one y is
therefore carried as the starting point for the next.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from typing import Callable, Sequence

from . import constants as C
from .config import SearchConfig, validate_limit, validate_moduli
from .equation import Equation
from .residues import ResidueTable
from .solutions import SolutionSet

__all__ = ["BracketResult", "SearchState", "SearchOutcome", "bracket_search", "TrialSearch"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BracketResult:
    """Outcome of :func:`bracket_search` for one target value.

    ``x`` is the matching x or ``None``. ``lower`` is the largest probe known
    to be too small (``None`` if the first probe already overshot).
    """

    x: int | None
    lower: int | None
    trials: int

    @property
    def found(self) -> bool:
        return self.x is not None


@dataclass(slots=True)
class SearchState:
    """Mutable bookkeeping for one :meth:`TrialSearch.run` call."""

    lower: int | None = None
    y_trials: int = 0
    x_trials: int = 0


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Result of one :meth:`TrialSearch.run`; ``last_y`` is the largest y examined."""

    found: bool
    solutions: SolutionSet
    limit: int
    y_trials: int
    x_trials: int
    elapsed: float
    cancelled: bool = False
    last_y: int | None = None


def bracket_search(equation: Equation, target: int, lower: int | None = None) -> BracketResult:
    """Look for x with ``equation.left(x) == target``.

    ``lower`` must be an x with ``left(lower) < target``; the search then
    starts there instead of at x=2. x=0 and x=1 are never probed.
    """
    if lower is not None and lower < C.FIRST_X:
        lower = None
    x = C.FIRST_X if lower is None else lower
    low: int | None = lower
    high: int | None = None
    trials = 0

    while True:
        value = equation.left(x)
        trials += 1
        if value == target:
            return BracketResult(x, low, trials)
        if value < target:
            low = x
            x = x * 2 if high is None else (low + high) // 2
        else:
            if low is None:
                return BracketResult(None, None, trials)
            high = x
            x = (low + high) // 2
        if high is not None and low is not None and high - low <= 1:
            return BracketResult(None, low, trials)


class TrialSearch:
    """Search session for one equation.

    The residue table is built lazily on the first run and reused until the
    screening moduli change. Solutions, counters and elapsed time describe the
    last run only.
    """

    name = "trials"

    def __init__(self, equation: Equation, config: SearchConfig | None = None) -> None:
        self.equation = equation
        self.config = replace(config) if config is not None else SearchConfig()
        self.solutions = SolutionSet()
        self.state = SearchState()
        self.elapsed: float = 0.0
        self._table: ResidueTable | None = None

    # ------------------------------------------------------------------
    # Configuration
    def set_limit(self, limit: int) -> None:
        self.config.limit = validate_limit(limit)

    def set_stop_at_first(self, stop_at_first: bool) -> None:
        self.config.stop_at_first = bool(stop_at_first)

    def set_verbose(self, verbose: bool) -> None:
        self.config.verbose = bool(verbose)

    def set_moduli(self, moduli: Sequence[int] | None) -> None:
        self.config.moduli = None if moduli is None else validate_moduli(moduli)
        self._table = None

    @property
    def residue_table(self) -> ResidueTable:
        if self._table is None or self._table.moduli != self.config.screening_moduli:
            self._table = ResidueTable(self.equation, self.config.screening_moduli)
        return self._table

    # ------------------------------------------------------------------
    # Search
    def run(self, *, should_stop: Callable[[], bool] | None = None) -> SearchOutcome:
        """Try every y in ``[2, limit]`` and collect the solutions found.

        ``should_stop`` is polled before each y; returning ``True`` ends the
        run early with ``cancelled`` set on the outcome.
        """
        start = time.perf_counter()
        cfg = self.config
        table = self.residue_table
        state = SearchState()
        solutions = SolutionSet()
        cancelled = False
        last_y: int | None = None

        for y in range(C.FIRST_X, cfg.limit + 1):
            if should_stop is not None and should_stop():
                cancelled = True
                break
            last_y = y
            target = self.equation.right(y)
            if not table.can_match(target):
                continue

            state.y_trials += 1
            result = bracket_search(self.equation, target, state.lower if cfg.carry_forward else None)
            state.x_trials += result.trials
            state.lower = result.lower

            if result.x is not None:
                solutions.add(result.x, y)
                if cfg.verbose:
                    logger.info("Solution: x=%d, y=%d", result.x, y)
                if cfg.stop_at_first:
                    break

        if cancelled and cfg.verbose:
            if last_y is None:
                logger.info("Search cancelled before any y was tried")
            else:
                logger.info("Search cancelled after y=%d", last_y)
        elif not solutions and cfg.verbose:
            logger.info("No solution up to y=%d", cfg.limit)
        logger.debug("Trials: %d x values for %d y values", state.x_trials, state.y_trials)

        self.elapsed = time.perf_counter() - start
        self.state = state
        self.solutions = solutions
        return SearchOutcome(
            found=bool(solutions),
            solutions=solutions,
            limit=cfg.limit,
            y_trials=state.y_trials,
            x_trials=state.x_trials,
            elapsed=self.elapsed,
            cancelled=cancelled,
            last_y=last_y,
        )

    def solve(self) -> bool:
        """Run the search; ``True`` if at least one solution was recorded."""
        return self.run().found

    def get_solutions(self) -> SolutionSet:
        return self.solutions
