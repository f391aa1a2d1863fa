"""Application filtering – typed criteria, predicates and query plans."""
from car_inventory.application.filtering.criteria import CriterionKey, RawCriteria
from car_inventory.application.filtering.predicates import (
    ManufacturerIs,
    ModelContains,
    Predicate,
    PriceAtLeast,
    PriceAtMost,
    SalesEquals,
    SegmentIs,
)
from car_inventory.application.filtering.plan import QueryPlan
from car_inventory.application.filtering.compiler import SORTABLE_FIELDS, FilterCompiler, compile_criteria
from car_inventory.application.filtering.store import CarStore
from car_inventory.application.filtering.executor import execute
from car_inventory.application.filtering.service import CarSearchService

__all__ = [
    "SORTABLE_FIELDS",
    "CarSearchService",
    "CarStore",
    "CriterionKey",
    "FilterCompiler",
    "ManufacturerIs",
    "ModelContains",
    "Predicate",
    "PriceAtLeast",
    "PriceAtMost",
    "QueryPlan",
    "RawCriteria",
    "SalesEquals",
    "SegmentIs",
    "compile_criteria",
    "execute",
]
