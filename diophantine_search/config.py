"""Validated option containers for the filters and the trial search."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from . import constants as C
from .errors import InvalidConfiguration

__all__ = ["ModuliConfig", "SearchConfig", "validate_limit", "validate_moduli"]

def validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidConfiguration(f"Invalid limit {limit!r} (must be an integer)")
    if limit < C.MIN_LIMIT:
        raise InvalidConfiguration(f"Invalid limit (min is {C.MIN_LIMIT})")
    return limit

def validate_moduli(moduli: Sequence[int]) -> tuple[int, ...]:
    values = tuple(moduli)
    if not values:
        raise InvalidConfiguration("At least one screening modulus is required")
    for k in values:
        if isinstance(k, bool) or not isinstance(k, int) or k < 2:
            raise InvalidConfiguration(f"Invalid screening modulus {k!r} (must be an integer >= 2)")
    return values

@dataclass(slots=True)
class ModuliConfig:
    """Options for the modulus necessity filter."""

    max_modulus: int = C.DEFAULT_MAX_MODULUS
    only_prime: bool = False
    verbose: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_modulus, bool) or not isinstance(self.max_modulus, int):
            raise InvalidConfiguration(f"Invalid max modulus {self.max_modulus!r}")
        if self.max_modulus < 2:
            raise InvalidConfiguration("Invalid max modulus (min is 2)")

@dataclass(slots=True)
class SearchConfig:
    """Options for :class:`~diophantine_search.search.TrialSearch`.

    ``limit`` is the largest y tested (inclusive). ``moduli`` overrides the
    default screening moduli when given. ``carry_forward`` keeps the lower
    bound for x from one y to the next.
    """

    limit: int = C.DEFAULT_LIMIT
    stop_at_first: bool = False
    moduli: tuple[int, ...] | None = None
    verbose: bool = True
    carry_forward: bool = True

    def __post_init__(self) -> None:
        validate_limit(self.limit)
        if self.moduli is not None:
            self.moduli = validate_moduli(self.moduli)

    @property
    def screening_moduli(self) -> tuple[int, ...]:
        return self.moduli if self.moduli is not None else C.DEFAULT_SCREENING_MODULI
