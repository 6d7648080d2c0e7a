"""Search integer solutions of ``A·x^n + B = C·y^m + D``.

Two strategies share one :class:`Equation` model: cheap necessary-condition
filters (Bézout and residues modulo small integers) that can prove an
equation has no solution, and a bounded trial search that finds solutions
with y up to a limit.

Typical usage
-------------
>>> from diophantine_search import Equation, SearchConfig, explore
>>> explore(Equation(1, 2, 2, 1, 3, 0), search_config=SearchConfig(limit=100, verbose=False)).verdict
'solutions'
"""
from importlib.metadata import version as _version  # type: ignore

from .bezout import BezoutFilter, bezout_possible
from .config import ModuliConfig, SearchConfig
from .equation import Equation
from .errors import DiophantineError, InvalidConfiguration, InvalidEquation
from .moduli import ModulusFilter, ModulusReport, analyze_modulus, find_obstruction, modulus_possible
from .residues import ResidueTable
from .search import BracketResult, SearchOutcome, SearchState, TrialSearch, bracket_search
from .solutions import SolutionSet
from .strategies import Exploration, explore, sweep

__all__ = [
    "Equation",
    "DiophantineError",
    "InvalidEquation",
    "InvalidConfiguration",
    "ModuliConfig",
    "SearchConfig",
    "bezout_possible",
    "BezoutFilter",
    "ModulusReport",
    "analyze_modulus",
    "find_obstruction",
    "modulus_possible",
    "ModulusFilter",
    "ResidueTable",
    "BracketResult",
    "SearchState",
    "SearchOutcome",
    "bracket_search",
    "TrialSearch",
    "SolutionSet",
    "Exploration",
    "explore",
    "sweep",
    "__version__",
]

try:
    __version__ = _version("diophantine_search")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
