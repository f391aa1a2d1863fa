"""Filtering – typed predicates over :class:`~car_inventory.domain.Car`.

Each predicate is a frozen value carrying an already-validated operand and
the :class:`CriterionKey` it was compiled from. The set is closed: store
adapters translate predicates with an exhaustive ``match`` over
:data:`Predicate`.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Union

from car_inventory.application.filtering.criteria import CriterionKey
from car_inventory.domain import Car, Segment
from car_inventory.kernel.ddd import BaseSpecification


@dataclasses.dataclass(frozen=True)
class SalesEquals(BaseSpecification[Car]):
    """Number of units sold equals ``value``."""

    key: ClassVar[CriterionKey] = CriterionKey.SALES
    value: int

    def is_satisfied_by(self, candidate: Car) -> bool:
        return candidate.sales == self.value


@dataclasses.dataclass(frozen=True)
class PriceAtLeast(BaseSpecification[Car]):
    """Inclusive lower price bound."""

    key: ClassVar[CriterionKey] = CriterionKey.MIN_PRICE
    value: float

    def is_satisfied_by(self, candidate: Car) -> bool:
        return candidate.price >= self.value


@dataclasses.dataclass(frozen=True)
class PriceAtMost(BaseSpecification[Car]):
    """Inclusive upper price bound."""

    key: ClassVar[CriterionKey] = CriterionKey.MAX_PRICE
    value: float

    def is_satisfied_by(self, candidate: Car) -> bool:
        return candidate.price <= self.value


@dataclasses.dataclass(frozen=True)
class ModelContains(BaseSpecification[Car]):
    """Model name contains ``text``, ignoring case."""

    key: ClassVar[CriterionKey] = CriterionKey.MODEL
    text: str

    def is_satisfied_by(self, candidate: Car) -> bool:
        return self.text.lower() in candidate.model.lower()


@dataclasses.dataclass(frozen=True)
class SegmentIs(BaseSpecification[Car]):
    key: ClassVar[CriterionKey] = CriterionKey.SEGMENT
    segment: Segment

    def is_satisfied_by(self, candidate: Car) -> bool:
        return candidate.segment is self.segment


@dataclasses.dataclass(frozen=True)
class ManufacturerIs(BaseSpecification[Car]):
    """Car is built by the manufacturer referenced by ``reference``.

    The reference matches the manufacturer name (ignoring case) or, when
    it is all digits, the manufacturer id. An unknown reference matches
    nothing.
    """

    key: ClassVar[CriterionKey] = CriterionKey.MANUFACTURER
    reference: str

    @property
    def manufacturer_id(self) -> int | None:
        return int(self.reference) if self.reference.isascii() and self.reference.isdigit() else None

    def is_satisfied_by(self, candidate: Car) -> bool:
        maker = candidate.manufacturer
        if maker is None:
            return False
        if maker.name.lower() == self.reference.lower():
            return True
        return maker.id is not None and maker.id == self.manufacturer_id


Predicate = Union[SalesEquals, PriceAtLeast, PriceAtMost, ModelContains, SegmentIs, ManufacturerIs]

__all__ = [
    "ManufacturerIs",
    "ModelContains",
    "Predicate",
    "PriceAtLeast",
    "PriceAtMost",
    "SalesEquals",
    "SegmentIs",
]
