"""Benchmark: criteria compilation and in-memory search.

Measures how long ``compile_criteria`` takes for an empty and a fully
populated criteria set, and the end-to-end cost of ``execute`` over a
10 000 car in-memory store.
"""

from __future__ import annotations

from car_inventory.application.filtering import RawCriteria, compile_criteria, execute
from car_inventory.application.pagination import PageRequest, Sort, SortDirection

_FULL = RawCriteria(
    sales="120",
    min_price="10000",
    max_price="20000.50",
    model="rav",
    segment="suv",
    manufacturer="Toyota",
)


# ---------------------------------------------------------------------------
# a) compile_criteria
# ---------------------------------------------------------------------------


def test_compile_empty(benchmark):
    """No criteria: the plan has no predicates."""
    plan = benchmark(compile_criteria, RawCriteria())
    assert plan.is_unfiltered


def test_compile_all_criteria(benchmark):
    """Every criterion present and valid."""
    plan = benchmark(compile_criteria, _FULL)
    assert len(plan.predicates) == 6


def test_compile_with_sort(benchmark):
    request = PageRequest(sorts=(Sort("price", SortDirection.DESC), Sort("model")))
    plan = benchmark(compile_criteria, _FULL, request)
    assert plan.page_request is request


# ---------------------------------------------------------------------------
# b) execute over InMemoryCarStore
# ---------------------------------------------------------------------------


def test_execute_unfiltered(benchmark, run_async, big_store):
    plan = compile_criteria(RawCriteria(), PageRequest(size=50))
    page = benchmark(lambda: run_async(execute(plan, big_store)))
    assert page.total == 10_000


def test_execute_segment_and_price(benchmark, run_async, big_store):
    plan = compile_criteria(
        RawCriteria(segment="SUV", min_price="10000", max_price="40000"),
        PageRequest(size=20, sorts=(Sort("price"),)),
    )
    page = benchmark(lambda: run_async(execute(plan, big_store)))
    assert all(car.segment.value == "SUV" for car in page.items)
    assert len(page.items) <= 20
