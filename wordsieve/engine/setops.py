"""
Set algebra over sequences of sets.

Each operation takes ONE non-empty sequence of sets:
  - zero sets  -> ValueError
  - one set    -> that set's contents, unchanged
  - many sets  -> folded left to right

Inputs are never mutated; results are frozensets.
"""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Sequence, TypeVar

T = TypeVar("T")


def _check(op: str, sets: Sequence[AbstractSet[T]]) -> None:
    if not sets:
        raise ValueError(f"{op} requires at least one set")


def union(sets: Sequence[AbstractSet[T]]) -> FrozenSet[T]:
    """Elements appearing in at least one of `sets`."""
    _check("union", sets)
    return frozenset().union(*sets)


def intersect(sets: Sequence[AbstractSet[T]]) -> FrozenSet[T]:
    """Elements appearing in every one of `sets`."""
    _check("intersect", sets)
    first, rest = sets[0], sets[1:]
    return frozenset(first).intersection(*rest)


def difference(sets: Sequence[AbstractSet[T]]) -> FrozenSet[T]:
    """Elements of the first set appearing in none of the others."""
    _check("difference", sets)
    first, rest = sets[0], sets[1:]
    return frozenset(first).difference(*rest)
