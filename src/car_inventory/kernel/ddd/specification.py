"""Specification pattern – composable boolean rules over records."""

from __future__ import annotations

import abc
from functools import reduce
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications – provides conjunction.

    Subclass this and implement ``is_satisfied_by``.

    Example::

        class InStock(BaseSpecification[Car]):
            def is_satisfied_by(self, candidate: Car) -> bool:
                return candidate.sales > 0

        spec = InStock() & SegmentIs(Segment.SUV)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def and_(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __and__(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class MatchAll(BaseSpecification[T]):
    """Neutral element of conjunction: accepts every candidate."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True

    def __repr__(self) -> str:  # pragma: no cover
        return "MatchAll()"


def all_of(specs: Iterable[BaseSpecification[T]]) -> BaseSpecification[T]:
    """Fold *specs* into a single conjunction (``MatchAll`` when empty)."""
    return reduce(lambda acc, spec: acc & spec, specs, MatchAll())


__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "MatchAll",
    "all_of",
]
