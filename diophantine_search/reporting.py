"""Human-readable rendering of equations and search results."""
from __future__ import annotations

from typing import Any

from . import constants as C
from .equation import Equation
from .residues import ResidueTable
from .search import SearchOutcome
from .strategies import Exploration

__all__ = [
    "format_equation",
    "format_elapsed",
    "format_trials",
    "format_coverage",
    "format_exploration",
    "exploration_to_dict",
]


def _side(mult: int, var: str, power: int, add: int) -> str:
    expr = "" if mult == 1 else str(mult)
    expr += var
    expr += "" if power == 1 else f"^{power}"
    if add:
        expr += f" {'+' if add > 0 else '-'} {abs(add)}"
    return expr


def format_equation(equation: Equation) -> str:
    """Render e.g. ``6x^2 + 3 = 5y^3 - 1``."""
    left = _side(equation.left_mult, "x", equation.left_pow, equation.left_add)
    right = _side(equation.right_mult, "y", equation.right_pow, equation.right_add)
    return f"{left} = {right}"


def format_elapsed(seconds: float) -> str:
    ms = int(seconds * 1000)
    if ms > C.ELAPSED_SECONDS_THRESHOLD_MS:
        return f"{ms // 1000}s"
    return f"{ms}ms"


def format_trials(outcome: SearchOutcome) -> str:
    return f"Trials: {outcome.x_trials} x values for {outcome.y_trials} y values"


def format_coverage(table: ResidueTable) -> list[str]:
    return [
        f"Left expression has {count} values modulo {k}" for k, count in table.coverage()
    ]


def format_exploration(result: Exploration) -> list[str]:
    """Lines describing ``result`` in the order a reader would want them."""
    lines = [f"Equation: {format_equation(result.equation)}"]
    if not result.bezout_ok:
        lines.append("  No solutions by Bezout's identity")
        return lines
    if result.obstruction is not None:
        lines.append(f"  There are no solutions mod {result.obstruction}")
        return lines
    outcome = result.outcome
    if outcome is None:
        return lines
    for x, y in outcome.solutions.items():
        lines.append(f"  Solution: x={x}, y={y}")
    if outcome.cancelled:
        if outcome.last_y is None:
            lines.append("  Search cancelled before any y was tried")
        else:
            lines.append(f"  Search cancelled after y={outcome.last_y}")
    elif not outcome.found:
        lines.append(f"  No solution up to y={outcome.limit}")
    lines.append(f"  {format_trials(outcome)}")
    lines.append(f"Elapsed: {format_elapsed(outcome.elapsed)}")
    return lines


def exploration_to_dict(result: Exploration) -> dict[str, Any]:
    """JSON-serialisable view of ``result``."""
    data: dict[str, Any] = {
        "equation": format_equation(result.equation),
        "coefficients": list(result.equation.coefficients),
        "verdict": result.verdict,
        "obstruction": result.obstruction,
    }
    if result.outcome is not None:
        out = result.outcome
        data["search"] = {
            "limit": out.limit,
            "solutions": [[x, y] for x, y in out.solutions.items()],
            "y_trials": out.y_trials,
            "x_trials": out.x_trials,
            "elapsed": out.elapsed,
            "cancelled": out.cancelled,
            "last_y": out.last_y,
        }
    return data
