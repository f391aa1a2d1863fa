"""FastAPI adapter – reusable dependency functions."""
from __future__ import annotations

from typing import Any, Callable, Coroutine

from fastapi import Query

from car_inventory.application.filtering import RawCriteria
from car_inventory.application.pagination import MAX_PAGE, PageRequest
from car_inventory.config import AppSettings


def make_pagination_dep(settings: AppSettings) -> Callable[..., Coroutine[Any, Any, PageRequest]]:
    """Return a dependency reading the ``page`` and ``size`` params."""

    async def pagination_dep(
        page: int = Query(default=0, ge=0, le=MAX_PAGE, description="0-based page number"),
        size: int = Query(
            default=settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            description="Items per page",
        ),
    ) -> PageRequest:
        return PageRequest(page=page, size=size)

    return pagination_dep


async def sort_dep(
    sort: list[str] = Query(default=[], description="field or field,asc|desc"),
) -> tuple[str, ...]:
    """Collect repeated ``sort`` params unparsed; the compiler validates them."""
    return tuple(sort)


async def criteria_dep(
    sales: str | None = Query(default=None),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    model: str | None = Query(default=None),
    segment: str | None = Query(default=None),
    manufacturer: str | None = Query(default=None),
) -> RawCriteria:
    """Collect the search criteria as untyped text; the compiler validates them."""
    return RawCriteria(
        sales=sales,
        min_price=min_price,
        max_price=max_price,
        model=model,
        segment=segment,
        manufacturer=manufacturer,
    )


__all__ = ["criteria_dep", "make_pagination_dep", "sort_dep"]
