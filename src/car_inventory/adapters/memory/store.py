"""In-memory adapter – InMemoryCarStore."""
from __future__ import annotations

import itertools
from typing import Any, Iterable, Sequence

from car_inventory.application.filtering import CarStore, Predicate
from car_inventory.application.pagination import Sort, SortDirection
from car_inventory.domain import Car
from car_inventory.kernel.ddd import all_of
from car_inventory.kernel.errors import NotFoundError


def _sort_key(field: str) -> Any:
    def key(car: Car) -> Any:
        value = getattr(car, field)
        return value.lower() if isinstance(value, str) else value

    return key


class InMemoryCarStore(CarStore):
    """Dict-backed store evaluating predicates as specifications.

    - Stores cars keyed by id; new cars get the next free id
    - Applies AND-semantics filtering before paging
    - ``count`` uses the same filter as ``find_page``
    """

    def __init__(self, cars: Iterable[Car] = ()) -> None:
        self._cars: dict[int, Car] = {}
        self._ids = itertools.count(1)
        for car in cars:
            self._insert(car)

    def _insert(self, car: Car) -> Car:
        if car.id is None:
            car = car.with_id(self._next_id())
        self._cars[car.id] = car  # type: ignore[index]
        return car

    def _next_id(self) -> int:
        while True:
            candidate = next(self._ids)
            if candidate not in self._cars:
                return candidate

    def _matching(self, predicates: Sequence[Predicate]) -> list[Car]:
        spec = all_of(predicates)
        return [car for car in self._cars.values() if spec.is_satisfied_by(car)]

    async def find_page(
        self,
        predicates: Sequence[Predicate],
        page: int,
        size: int,
        sorts: Sequence[Sort] = (),
    ) -> list[Car]:
        results = sorted(self._matching(predicates), key=_sort_key("id"))
        for sort in reversed(sorts):
            results.sort(key=_sort_key(sort.field), reverse=sort.direction is SortDirection.DESC)
        start = page * size
        return results[start:start + size]

    async def count(self, predicates: Sequence[Predicate]) -> int:
        return len(self._matching(predicates))

    async def get(self, car_id: int) -> Car | None:
        return self._cars.get(car_id)

    async def get_or_raise(self, car_id: int) -> Car:
        car = await self.get(car_id)
        if car is None:
            raise NotFoundError("Car", car_id)
        return car

    async def save(self, car: Car) -> Car:
        return self._insert(car)

    async def delete(self, car_id: int) -> None:
        await self.get_or_raise(car_id)
        del self._cars[car_id]

    async def list_all(self) -> list[Car]:
        return sorted(self._cars.values(), key=_sort_key("id"))


__all__ = ["InMemoryCarStore"]
