from __future__ import annotations

import pytest

from diophantine_search.equation import Equation
from diophantine_search.errors import DiophantineError, InvalidEquation


def test_sides_evaluate_exactly() -> None:
    eq = Equation(6, 2, 3, 5, 3, -1)
    assert eq.left(2) == 27
    assert eq.right(2) == 39
    assert eq.left(0) == 3
    assert eq.right(0) == -1


def test_large_values_do_not_overflow() -> None:
    eq = Equation(7, 5, -(10**40), 3, 7, 10**40)
    x = 10**20
    assert eq.left(x) == 7 * x**5 - 10**40
    assert eq.left_mod(x, 97) == eq.left(x) % 97
    assert eq.right_mod(123456789, 840) == eq.right(123456789) % 840


@pytest.mark.parametrize(
    "coefficients",
    [
        (0, 2, 0, 1, 3, 0),
        (1, 0, 0, 1, 3, 0),
        (1, 2, 0, -1, 3, 0),
        (1, 2, 0, 1, -3, 0),
    ],
)
def test_non_positive_terms_rejected(coefficients: tuple[int, ...]) -> None:
    with pytest.raises(InvalidEquation):
        Equation.from_coefficients(coefficients)  # type: ignore[arg-type]


def test_non_integer_coefficients_rejected() -> None:
    with pytest.raises(InvalidEquation):
        Equation(1, 2, 0.5, 1, 3, 0)  # type: ignore[arg-type]
    with pytest.raises(InvalidEquation):
        Equation(True, 2, 0, 1, 3, 0)  # type: ignore[arg-type]


def test_invalid_equation_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Equation(1, 2, 0, 0, 3, 0)
    assert issubclass(InvalidEquation, DiophantineError)


def test_equation_is_immutable() -> None:
    eq = Equation(1, 2, 0, 1, 3, 0)
    with pytest.raises(AttributeError):
        eq.left_mult = 2  # type: ignore[misc]
    assert eq.coefficients == (1, 2, 0, 1, 3, 0)
