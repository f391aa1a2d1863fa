"""SQLAlchemy adapter – SqlAlchemyCarStore."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator, Callable, Sequence

from sqlalchemy import ColumnElement, and_, func, or_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from car_inventory.adapters.sqlalchemy.models import CarRow, ManufacturerRow
from car_inventory.application.filtering import (
    CarStore,
    ManufacturerIs,
    ModelContains,
    Predicate,
    PriceAtLeast,
    PriceAtMost,
    SalesEquals,
    SegmentIs,
)
from car_inventory.application.pagination import Sort, SortDirection
from car_inventory.domain import Car, Manufacturer
from car_inventory.kernel.errors import NotFoundError, StoreError
from car_inventory.observability.logging import get_logger

_log = get_logger(__name__)

_SORT_COLUMNS = {
    "id": CarRow.id,
    "model": CarRow.model,
    "price": CarRow.price,
    "sales": CarRow.sales,
}


def _manufacturer_clause(predicate: ManufacturerIs) -> ColumnElement[bool]:
    condition = func.lower(ManufacturerRow.name) == predicate.reference.lower()
    if predicate.manufacturer_id is not None:
        condition = or_(condition, ManufacturerRow.id == predicate.manufacturer_id)
    return CarRow.manufacturer_id.in_(select(ManufacturerRow.id).where(condition))


def to_clause(predicate: Predicate) -> ColumnElement[bool]:
    """Translate one predicate into a SQL boolean expression over ``car``."""
    match predicate:
        case SalesEquals(value=value):
            return CarRow.sales == value
        case PriceAtLeast(value=value):
            return CarRow.price >= value
        case PriceAtMost(value=value):
            return CarRow.price <= value
        case ModelContains(text=text):
            return func.lower(CarRow.model).contains(text.lower(), autoescape=True)
        case SegmentIs(segment=segment):
            return CarRow.segment == segment
        case ManufacturerIs():
            return _manufacturer_clause(predicate)
        case _:
            raise TypeError(f"unsupported predicate {predicate!r}")


def _where(predicates: Sequence[Predicate]) -> ColumnElement[bool]:
    if not predicates:
        return true()
    return and_(*(to_clause(p) for p in predicates))


class SqlAlchemyCarStore(CarStore):
    """Async SQLAlchemy 2.x car store.

    Each call opens its own session from *session_factory* (for instance a
    :class:`~car_inventory.adapters.sqlalchemy.SqlAlchemySessionFactory`),
    so one store instance can serve concurrent requests. Create the tables
    with :func:`~car_inventory.adapters.sqlalchemy.create_schema` first.

    Any :class:`~sqlalchemy.exc.SQLAlchemyError`, and any driver
    :class:`OverflowError` for an out-of-range parameter, is re-raised as
    :class:`~car_inventory.kernel.errors.StoreError`.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    @contextlib.asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OverflowError) as exc:
            _log.error("store_failure", operation=operation, error=repr(exc))
            raise StoreError(operation, cause=exc) from exc

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def find_page(
        self,
        predicates: Sequence[Predicate],
        page: int,
        size: int,
        sorts: Sequence[Sort] = (),
    ) -> list[Car]:
        order_by: list[Any] = []
        for sort in sorts:
            column = _SORT_COLUMNS[sort.field]
            order_by.append(column.desc() if sort.direction is SortDirection.DESC else column.asc())
        order_by.append(CarRow.id.asc())

        stmt = (
            select(CarRow)
            .where(_where(predicates))
            .order_by(*order_by)
            .offset(page * size)
            .limit(size)
        )
        async with self._session("find_page") as session:
            result = await session.execute(stmt)
            return [row.to_domain() for row in result.scalars().all()]

    async def count(self, predicates: Sequence[Predicate]) -> int:
        stmt = select(func.count()).select_from(CarRow).where(_where(predicates))
        async with self._session("count") as session:
            return (await session.execute(stmt)).scalar_one()

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def get(self, car_id: int) -> Car | None:
        async with self._session("get") as session:
            row = await session.get(CarRow, car_id)
            return row.to_domain() if row is not None else None

    async def get_or_raise(self, car_id: int) -> Car:
        car = await self.get(car_id)
        if car is None:
            raise NotFoundError("Car", car_id)
        return car

    async def _resolve_manufacturer(
        self, session: AsyncSession, manufacturer: Manufacturer | None
    ) -> ManufacturerRow | None:
        if manufacturer is None:
            return None
        if manufacturer.id is not None:
            row = await session.get(ManufacturerRow, manufacturer.id)
            if row is None:
                raise NotFoundError("Manufacturer", manufacturer.id)
            return row
        stmt = select(ManufacturerRow).where(
            func.lower(ManufacturerRow.name) == manufacturer.name.lower()
        )
        row = (await session.execute(stmt)).scalars().first()
        if row is None:
            row = ManufacturerRow(name=manufacturer.name, country=manufacturer.country)
            session.add(row)
        return row

    async def save(self, car: Car) -> Car:
        async with self._session("save") as session:
            # resolve first: the lookup autoflushes, and a half-built row must not be pending
            manufacturer = await self._resolve_manufacturer(session, car.manufacturer)
            row = await session.get(CarRow, car.id) if car.id is not None else None
            if row is None:
                row = CarRow(id=car.id)
                session.add(row)
            row.assign(car, manufacturer)
            await session.commit()
            return row.to_domain()

    async def delete(self, car_id: int) -> None:
        async with self._session("delete") as session:
            row = await session.get(CarRow, car_id)
            if row is None:
                raise NotFoundError("Car", car_id)
            await session.delete(row)
            await session.commit()

    async def list_all(self) -> list[Car]:
        async with self._session("list_all") as session:
            result = await session.execute(select(CarRow).order_by(CarRow.id))
            return [row.to_domain() for row in result.scalars().all()]


__all__ = ["SqlAlchemyCarStore", "to_clause"]
