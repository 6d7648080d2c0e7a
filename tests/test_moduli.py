from __future__ import annotations

import logging

import pytest

from diophantine_search.config import ModuliConfig
from diophantine_search.equation import Equation
from diophantine_search.errors import InvalidConfiguration
from diophantine_search.moduli import (
    ModulusFilter,
    analyze_modulus,
    find_obstruction,
    modulus_possible,
)


def test_linear_parity_disproved_mod_two() -> None:
    eq = Equation(2, 1, 1, 2, 1, 0)
    report = analyze_modulus(eq, 2)
    assert report.left == frozenset({1})
    assert report.right == frozenset({0})
    assert not report.possible
    assert find_obstruction(eq) == 2
    assert not modulus_possible(eq)


def test_swapping_sides_gives_same_verdict() -> None:
    eq = Equation(2, 1, 1, 2, 1, 0)
    swapped = Equation(2, 1, 0, 2, 1, 1)
    for i in range(2, 30):
        a = analyze_modulus(eq, i)
        b = analyze_modulus(swapped, i)
        assert a.left == b.right
        assert a.right == b.left
        assert a.common == b.common


def test_difference_of_squares_two_disproved_mod_four() -> None:
    # x^2 = y^2 + 2 has no solution: squares are 0 or 1 mod 4
    eq = Equation(1, 2, 0, 1, 2, 2)
    assert analyze_modulus(eq, 2).possible
    assert analyze_modulus(eq, 3).possible
    report = analyze_modulus(eq, 4)
    assert report.left == frozenset({0, 1})
    assert report.right == frozenset({2, 3})
    assert find_obstruction(eq) == 4


def test_only_prime_skips_composite_moduli() -> None:
    eq = Equation(1, 2, 0, 1, 2, 2)
    assert analyze_modulus(eq, 4, only_prime=True).skipped
    assert analyze_modulus(eq, 4, only_prime=True).possible
    assert find_obstruction(eq, 100, only_prime=True) is None


def test_max_modulus_is_exclusive() -> None:
    eq = Equation(1, 2, 0, 1, 2, 2)
    assert find_obstruction(eq, 4) is None
    assert find_obstruction(eq, 5) == 4


def test_solvable_equation_passes_every_modulus() -> None:
    assert modulus_possible(Equation(1, 2, 0, 1, 2, 0), 120)


def test_filter_records_obstruction_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="diophantine_search")
    flt = ModulusFilter(ModuliConfig(max_modulus=50))
    assert not flt.is_possible(Equation(2, 1, 1, 2, 1, 0))
    assert flt.obstruction == 2
    assert flt.elapsed >= 0.0
    assert "There are no solutions mod 2" in caplog.text


def test_filter_setters() -> None:
    flt = ModulusFilter()
    flt.set_max_modulus(5)
    flt.set_only_prime(True)
    flt.set_verbose(False)
    assert flt.config.max_modulus == 5
    assert flt.is_possible(Equation(1, 2, 0, 1, 2, 2))
    with pytest.raises(InvalidConfiguration):
        flt.set_max_modulus(1)


def test_moduli_config_rejects_small_bound() -> None:
    with pytest.raises(InvalidConfiguration):
        ModuliConfig(max_modulus=1)


def test_only_prime_still_finds_prime_obstruction() -> None:
    eq = Equation(2, 1, 1, 2, 1, 0)
    assert not analyze_modulus(eq, 2, only_prime=True).skipped
    assert find_obstruction(eq, 50, only_prime=True) == 2
    flt = ModulusFilter(ModuliConfig(max_modulus=50, only_prime=True, verbose=False))
    assert not flt.is_possible(eq)


def test_filters_sharing_a_config_stay_independent() -> None:
    cfg = ModuliConfig(max_modulus=50, verbose=False)
    a = ModulusFilter(cfg)
    b = ModulusFilter(cfg)
    a.set_only_prime(True)
    a.set_verbose(True)
    a.set_max_modulus(10)
    assert not b.config.only_prime
    assert not b.config.verbose
    assert b.config.max_modulus == 50
    assert not cfg.only_prime
    # 4 is composite, so only b sees the obstruction of x^2 = y^2 + 2
    assert b.is_possible(Equation(1, 2, 0, 1, 2, 2)) is False
    assert a.is_possible(Equation(1, 2, 0, 1, 2, 2)) is True
