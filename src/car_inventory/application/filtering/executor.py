"""Filtering – run a :class:`QueryPlan` against a :class:`CarStore`."""
from __future__ import annotations

from car_inventory.application.filtering.plan import QueryPlan
from car_inventory.application.filtering.store import CarStore
from car_inventory.application.pagination import Page
from car_inventory.domain import Car


async def execute(plan: QueryPlan, store: CarStore) -> Page[Car]:
    """Fetch the requested page and the filtered total from *store*.

    Both calls receive the same predicates so ``Page.total`` (and hence
    ``total_pages``) describes the filtered set. Store errors propagate
    unchanged.
    """
    request = plan.page_request
    total = await store.count(plan.predicates)
    items = await store.find_page(plan.predicates, request.page, request.size, request.sorts)
    return Page.of(items, total, request)


__all__ = ["execute"]
