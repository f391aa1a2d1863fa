"""conftest.py for benchmarks.

Provides a reusable event loop and a seeded in-memory car store.

The ``event_loop`` fixture is session-scoped so every benchmark in the
session shares a single asyncio event loop; this amortises the
``asyncio.new_event_loop()`` startup cost and gives more stable timing.
"""

from __future__ import annotations

import asyncio

import pytest

from car_inventory.adapters.memory import InMemoryCarStore
from car_inventory.domain import Car, Manufacturer, Segment

_MAKERS = [Manufacturer(id=i + 1, name=name) for i, name in enumerate(("Toyota", "BMW", "Fiat", "Kia"))]
_SEGMENTS = list(Segment)


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all async benchmark helpers."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Helper that executes a coroutine in the session event loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(lambda: run_async(some_coroutine_factory()))
    """

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run


@pytest.fixture(scope="session")
def big_store() -> InMemoryCarStore:
    """10 000 cars spread over every segment and four manufacturers."""
    return InMemoryCarStore(
        Car(
            id=i,
            model=f"Model {i}",
            price=float(5000 + (i * 37) % 90000),
            sales=i % 500,
            segment=_SEGMENTS[i % len(_SEGMENTS)],
            manufacturer=_MAKERS[i % len(_MAKERS)],
        )
        for i in range(1, 10_001)
    )
