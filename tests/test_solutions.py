from __future__ import annotations

from diophantine_search.solutions import SolutionSet


def test_ordered_by_x() -> None:
    sols = SolutionSet()
    sols.add(27, 9)
    sols.add(8, 4)
    sols.add(64, 16)
    assert list(sols) == [8, 27, 64]
    assert sols.items() == [(8, 4), (27, 9), (64, 16)]
    assert sols[27] == 9
    assert 8 in sols and 9 not in sols
    assert len(sols) == 3


def test_equality_and_truthiness() -> None:
    a, b = SolutionSet(), SolutionSet()
    assert not a
    assert a == b
    a.add(5, 3)
    assert a != b
    b.add(5, 3)
    assert a == b
    assert a.as_dict() == {5: 3}
