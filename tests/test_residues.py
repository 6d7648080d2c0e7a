from __future__ import annotations

from diophantine_search import constants as C
from diophantine_search.equation import Equation
from diophantine_search.residues import ResidueTable


def test_squares_mod_four() -> None:
    table = ResidueTable(Equation(1, 2, 0, 1, 3, 0), (4,))
    assert table.can_match(5)
    assert table.can_match(8)
    assert not table.can_match(2)
    assert not table.can_match(-1)
    assert table.coverage() == [(4, 2)]


def test_every_listed_modulus_must_match() -> None:
    table = ResidueTable(Equation(1, 2, 0, 1, 3, 0), (4, 3))
    # 6 is 2 mod 4
    assert not table.can_match(6)
    # 5 is 1 mod 4 but 2 mod 3, which is not a square mod 3
    assert not table.can_match(5)
    assert table.can_match(9)


def test_default_moduli_never_reject_real_values() -> None:
    eq = Equation(6, 2, 2, 2, 3, 0)
    table = ResidueTable(eq, C.DEFAULT_SCREENING_MODULI)
    assert table.moduli == (840, 1104, 2431)
    for x in range(0, 200):
        assert table.can_match(eq.left(x))


def test_odd_left_side_rejects_even_values() -> None:
    table = ResidueTable(Equation(2, 1, 1, 2, 1, 0), C.DEFAULT_SCREENING_MODULI)
    assert not table.can_match(10)
    assert table.can_match(11)
