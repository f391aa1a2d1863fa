"""Filtering – CarSearchService use case."""
from __future__ import annotations

from typing import Sequence

from car_inventory.application.filtering.compiler import FilterCompiler
from car_inventory.application.filtering.criteria import RawCriteria
from car_inventory.application.filtering.executor import execute
from car_inventory.application.filtering.store import CarStore
from car_inventory.application.pagination import Page, PageRequest
from car_inventory.domain import Car
from car_inventory.observability.logging import get_logger

_log = get_logger(__name__)


class CarSearchService:
    """Compile raw criteria and execute them against a store.

    Validation happens before the store is touched: a request with an
    invalid criterion never reaches the store.
    """

    def __init__(self, store: CarStore, compiler: FilterCompiler | None = None) -> None:
        self._store = store
        self._compiler = compiler or FilterCompiler()

    async def search(
        self,
        raw: RawCriteria,
        page_request: PageRequest | None = None,
        sort: Sequence[str] = (),
    ) -> Page[Car]:
        plan = self._compiler.compile(raw, page_request, sort)
        page = await execute(plan, self._store)
        _log.info(
            "car_search",
            criteria=[key.value for key in raw.present()],
            filtered=not plan.is_unfiltered,
            total=page.total,
            page=page.page,
            returned=len(page.items),
        )
        return page


__all__ = ["CarSearchService"]
