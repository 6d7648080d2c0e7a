"""Immutable model of the equation ``A·x^n + B = C·y^m + D``."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidEquation

__all__ = ["Equation"]


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEquation(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Equation:
    """Coefficients of ``left_mult·x^left_pow + left_add = right_mult·y^right_pow + right_add``.

    ``left_mult``, ``left_pow``, ``right_mult`` and ``right_pow`` must be
    positive; the additive constants are arbitrary integers. Python ints are
    unbounded, so evaluating either side never overflows.
    """

    left_mult: int
    left_pow: int
    left_add: int
    right_mult: int
    right_pow: int
    right_add: int

    def __post_init__(self) -> None:
        for name in ("left_mult", "left_pow", "left_add", "right_mult", "right_pow", "right_add"):
            _require_int(name, getattr(self, name))
        if self.left_pow <= 0 or self.right_pow <= 0:
            raise InvalidEquation("Powers (x^n, y^m) must be positive")
        if self.left_mult <= 0 or self.right_mult <= 0:
            raise InvalidEquation("Factors (A*x, C*y) must be positive")

    @classmethod
    def from_coefficients(cls, coefficients: tuple[int, int, int, int, int, int]) -> "Equation":
        """Build from ``(A, n, B, C, m, D)``."""
        return cls(*coefficients)

    @property
    def coefficients(self) -> tuple[int, int, int, int, int, int]:
        return (
            self.left_mult,
            self.left_pow,
            self.left_add,
            self.right_mult,
            self.right_pow,
            self.right_add,
        )

    def left(self, x: int) -> int:
        """Return ``A·x^n + B``."""
        return self.left_mult * x**self.left_pow + self.left_add

    def right(self, y: int) -> int:
        """Return ``C·y^m + D``."""
        return self.right_mult * y**self.right_pow + self.right_add

    def left_mod(self, x: int, modulus: int) -> int:
        """Return ``left(x) mod modulus`` without building the full power."""
        return (self.left_mult * pow(x, self.left_pow, modulus) + self.left_add) % modulus

    def right_mod(self, y: int, modulus: int) -> int:
        """Return ``right(y) mod modulus`` without building the full power."""
        return (self.right_mult * pow(y, self.right_pow, modulus) + self.right_add) % modulus
