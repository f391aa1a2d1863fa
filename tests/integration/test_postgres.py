"""Integration tests for SqlAlchemyCarStore on PostgreSQL.

Uses testcontainers to spawn a real PostgreSQL instance.
Run with: pytest tests/integration/test_postgres.py -m integration -v
"""
from __future__ import annotations

import asyncio
from typing import Any

import pytest
from testcontainers.postgres import PostgresContainer

from car_inventory.adapters.sqlalchemy import SqlAlchemyCarStore, SqlAlchemySessionFactory, create_schema
from car_inventory.application.filtering import RawCriteria, compile_criteria, execute
from car_inventory.application.pagination import PageRequest, Sort, SortDirection
from car_inventory.domain import Car, Manufacturer, Segment


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


def _pg_url(container: Any) -> str:
    """Return an asyncpg-compatible URL from a PostgresContainer."""
    raw = container.get_connection_url()
    # testcontainers returns psycopg2 URL; swap driver for asyncpg
    return raw.replace("psycopg2", "asyncpg", 1)


def _inventory() -> list[Car]:
    toyota = Manufacturer(name="Toyota", country="JP")
    bmw = Manufacturer(name="BMW", country="DE")
    return [
        Car(model="RAV4", price=15000.0, sales=120, segment=Segment.SUV, manufacturer=toyota),
        Car(model="Corolla", price=12000.0, sales=300, segment=Segment.MEDIUM, manufacturer=toyota),
        Car(model="X5", price=55000.0, sales=80, segment=Segment.SUV, manufacturer=bmw),
        Car(model="X1", price=20000.0, sales=120, segment=Segment.SUV, manufacturer=bmw),
        Car(model="Land Cruiser", price=48000.0, sales=15, segment=Segment.SUV, manufacturer=toyota),
    ]


async def _seed(url: str) -> tuple[SqlAlchemyCarStore, SqlAlchemySessionFactory]:
    factory = SqlAlchemySessionFactory(url)
    await create_schema(factory.engine)
    store = SqlAlchemyCarStore(factory)
    for car in _inventory():
        await store.save(car)
    return store, factory


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestSqlAlchemyCarStorePostgres:
    """Filtered search against a real PostgreSQL server."""

    def test_filtered_page_and_total(self) -> None:
        with PostgresContainer("postgres:16-alpine") as container:
            url = _pg_url(container)

            async def run() -> None:
                store, factory = await _seed(url)
                plan = compile_criteria(
                    RawCriteria(min_price="10000", max_price="20000", segment="suv"),
                    PageRequest(page=0, size=1, sorts=(Sort("price", SortDirection.ASC),)),
                )
                page = await execute(plan, store)
                assert [c.model for c in page.items] == ["RAV4"]
                assert page.total == 2
                assert page.total_pages == 2
                await factory.dispose()

            _run(run())

    def test_manufacturer_and_model(self) -> None:
        with PostgresContainer("postgres:16-alpine") as container:
            url = _pg_url(container)

            async def run() -> None:
                store, factory = await _seed(url)
                plan = compile_criteria(RawCriteria(manufacturer="toyota", model="LAND"))
                page = await execute(plan, store)
                assert [c.model for c in page.items] == ["Land Cruiser"]
                assert page.items[0].manufacturer is not None
                assert page.items[0].manufacturer.name == "Toyota"
                await factory.dispose()

            _run(run())

    def test_crud_round(self) -> None:
        with PostgresContainer("postgres:16-alpine") as container:
            url = _pg_url(container)

            async def run() -> None:
                store, factory = await _seed(url)
                saved = await store.save(Car(model="M3", price=70000.0, sales=25, segment=Segment.SPORT))
                assert saved.id is not None
                await store.delete(saved.id)
                assert await store.get(saved.id) is None
                assert len(await store.list_all()) == len(_inventory())
                await factory.dispose()

            _run(run())
