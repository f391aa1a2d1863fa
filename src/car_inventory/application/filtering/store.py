"""Filtering – CarStore port consumed by the search pipeline."""
from __future__ import annotations

import abc
from typing import Sequence

from car_inventory.application.filtering.predicates import Predicate
from car_inventory.application.pagination import Sort
from car_inventory.domain import Car


class CarStore(abc.ABC):
    """Port: persistence for car records.

    Search contract
    ---------------
    * every predicate passed in is ANDed with the others;
    * ``find_page`` returns one page of the filtered set in a stable order
      (requested sorts, then ``id`` ascending as a tie-breaker);
    * ``count`` returns the size of the filtered set for the same predicates.

    Failures surface as :class:`~car_inventory.kernel.errors.StoreError`.
    Concrete implementations live in ``adapters/memory`` and
    ``adapters/sqlalchemy``.
    """

    @abc.abstractmethod
    async def find_page(
        self,
        predicates: Sequence[Predicate],
        page: int,
        size: int,
        sorts: Sequence[Sort] = (),
    ) -> list[Car]: ...

    @abc.abstractmethod
    async def count(self, predicates: Sequence[Predicate]) -> int: ...

    @abc.abstractmethod
    async def get(self, car_id: int) -> Car | None: ...

    @abc.abstractmethod
    async def get_or_raise(self, car_id: int) -> Car: ...

    @abc.abstractmethod
    async def save(self, car: Car) -> Car:
        """Insert or update *car*; returns the stored record with its id."""

    @abc.abstractmethod
    async def delete(self, car_id: int) -> None: ...

    @abc.abstractmethod
    async def list_all(self) -> list[Car]: ...


__all__ = ["CarStore"]
