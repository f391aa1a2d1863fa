"""Application – use-case building blocks (framework-agnostic)."""

from car_inventory.application.pagination import Page, PageRequest, Sort, SortDirection
from car_inventory.application.filtering import (
    CarSearchService,
    CarStore,
    FilterCompiler,
    QueryPlan,
    RawCriteria,
    compile_criteria,
    execute,
)

__all__ = [
    "CarSearchService",
    "CarStore",
    "FilterCompiler",
    "Page",
    "PageRequest",
    "QueryPlan",
    "RawCriteria",
    "Sort",
    "SortDirection",
    "compile_criteria",
    "execute",
]
