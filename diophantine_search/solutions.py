"""Ordered collection of discovered ``(x, y)`` solutions."""
from __future__ import annotations

from typing import Iterator

__all__ = ["SolutionSet"]


class SolutionSet:
    """Append‑only mapping ``x -> y`` iterated in ascending ``x`` order."""

    def __init__(self) -> None:
        self._by_x: dict[int, int] = {}

    def add(self, x: int, y: int) -> None:
        self._by_x[x] = y

    def __len__(self) -> int:
        return len(self._by_x)

    def __bool__(self) -> bool:
        return bool(self._by_x)

    def __contains__(self, x: object) -> bool:
        return x in self._by_x

    def __getitem__(self, x: int) -> int:
        return self._by_x[x]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._by_x))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SolutionSet):
            return self._by_x == other._by_x
        return NotImplemented

    def __repr__(self) -> str:
        return f"SolutionSet({self.items()!r})"

    def items(self) -> list[tuple[int, int]]:
        return [(x, self._by_x[x]) for x in sorted(self._by_x)]

    def as_dict(self) -> dict[int, int]:
        return dict(self.items())
