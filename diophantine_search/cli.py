"""Command‑line interface around :pyfunc:`diophantine_search.strategies.explore`."""
from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Callable

from . import constants as C
from .config import ModuliConfig, SearchConfig
from .equation import Equation
from .errors import DiophantineError
from .plot import render_solutions
from .reporting import exploration_to_dict, format_coverage, format_equation, format_exploration
from .residues import ResidueTable
from .strategies import Exploration, explore

__all__ = ["main"]


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(
        description="Search integer solutions of A*x^n + B = C*y^m + D",
    )
    parser.add_argument(
        "--equation",
        nargs=6,
        type=int,
        metavar=("A", "N", "B", "C", "M", "D"),
        help="Coefficients of A*x^n + B = C*y^m + D",
    )
    parser.add_argument("--demo", action="store_true", help="Run the 6x^2 + 2 = 2y^3 demo")
    parser.add_argument(
        "--sweep-b",
        nargs=2,
        type=int,
        metavar=("START", "STOP"),
        help="Repeat the run for every B in [START, STOP] (inclusive)",
    )
    parser.add_argument("--limit", type=int, default=C.DEFAULT_LIMIT, help="Largest y to try")
    parser.add_argument(
        "--max-modulus",
        type=int,
        default=C.DEFAULT_MAX_MODULUS,
        help="Exclusive upper bound on moduli tested by the necessity filter",
    )
    parser.add_argument("--only-prime", action="store_true", help="Test prime moduli only")
    parser.add_argument("--stop-at-first", action="store_true", help="Stop at the first solution")
    parser.add_argument(
        "--moduli",
        nargs="+",
        type=int,
        help="Screening moduli for the trial search (default: 840 1104 2431)",
    )
    parser.add_argument("--timeout", type=float, help="Abandon each search after this many seconds")
    parser.add_argument(
        "--coverage",
        action="store_true",
        help="Print how many residues the left side reaches per screening modulus",
    )
    parser.add_argument("--out", help="Write JSON results to file")
    parser.add_argument("--plot", help="Write a PNG scatter plot of the solutions (single equation only)")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for diophantine_search",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("diophantine_search")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _deadline(timeout: float | None) -> Callable[[], bool] | None:
    if timeout is None:
        return None
    end = time.perf_counter() + timeout
    return lambda: time.perf_counter() >= end


def _resolve_equations(ns: argparse.Namespace) -> list[Equation]:
    if ns.demo and ns.equation:
        sys.exit("Error: --demo cannot be combined with --equation.")
    if ns.demo:
        base = C._DEMO_EQUATION
    elif ns.equation:
        base = tuple(ns.equation)
    else:
        sys.exit("Error: --equation is required unless using --demo.")

    if not ns.sweep_b:
        return [Equation.from_coefficients(base)]
    start, stop = ns.sweep_b
    if stop < start:
        sys.exit("Error: --sweep-b STOP must not be smaller than START.")
    a, n, _b, c, m, d = base
    return [Equation(a, n, b, c, m, d) for b in range(start, stop + 1)]


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)
    verbose = ns.log_level in {"INFO", "DEBUG"}

    try:
        equations = _resolve_equations(ns)
        moduli_config = ModuliConfig(ns.max_modulus, ns.only_prime, verbose)
        search_config = SearchConfig(
            limit=ns.limit,
            stop_at_first=ns.stop_at_first,
            moduli=tuple(ns.moduli) if ns.moduli else None,
            verbose=verbose,
        )
    except DiophantineError as exc:
        sys.exit(f"Error: {exc}")

    results: list[Exploration] = []
    for equation in equations:
        if ns.coverage:
            table = ResidueTable(equation, search_config.screening_moduli)
            print(f"Equation: {format_equation(equation)}")
            for line in format_coverage(table):
                print(f"  {line}")
        result = explore(
            equation,
            moduli_config=moduli_config,
            search_config=search_config,
            should_stop=_deadline(ns.timeout),
        )
        results.append(result)
        for line in format_exploration(result):
            print(line)

    if ns.plot:
        if len(results) != 1:
            sys.exit("Error: --plot needs a single equation.")
        outcome = results[0].outcome
        if outcome is None:
            print("Nothing to plot: the search did not run.")
        else:
            path = render_solutions(
                outcome.solutions, title=format_equation(results[0].equation), path=ns.plot
            )
            print(f"✔ Solution plot written to {path}")

    if ns.out:
        payload = [exploration_to_dict(r) for r in results]
        Path(ns.out).write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        print(f"✔ Results JSON written to {ns.out}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
