"""Filtering – compile raw criteria into a :class:`QueryPlan`.

Criteria are processed in :class:`CriterionKey` order and the first
invalid one aborts compilation, so a caller always sees exactly one
error naming exactly one field. Range bounds are independent: a minimum
price above the maximum compiles fine and simply matches nothing.
"""
from __future__ import annotations

import dataclasses
import math
import re
from typing import Callable, Sequence

from car_inventory.application.filtering.criteria import CriterionKey, RawCriteria
from car_inventory.application.filtering.plan import QueryPlan
from car_inventory.application.filtering.predicates import (
    ManufacturerIs,
    ModelContains,
    Predicate,
    PriceAtLeast,
    PriceAtMost,
    SalesEquals,
    SegmentIs,
)
from car_inventory.application.pagination import PageRequest, Sort
from car_inventory.domain import MAX_SALES, MIN_SALES, Segment
from car_inventory.kernel.errors import InvalidEnumError, InvalidNumberError, InvalidSortError
from car_inventory.observability.logging import get_logger

SORTABLE_FIELDS: tuple[str, ...] = ("id", "model", "price", "sales")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

_log = get_logger(__name__)


def _parse_int(key: CriterionKey, text: str) -> int:
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise InvalidNumberError(key.value, text)
    value = int(stripped)
    if not MIN_SALES <= value <= MAX_SALES:
        raise InvalidNumberError(key.value, text)
    return value


def _parse_float(key: CriterionKey, text: str) -> float:
    stripped = text.strip()
    if not _DECIMAL.fullmatch(stripped):
        raise InvalidNumberError(key.value, text)
    value = float(stripped)
    if not math.isfinite(value):
        raise InvalidNumberError(key.value, text)
    return value


def _sales(text: str) -> Predicate:
    return SalesEquals(_parse_int(CriterionKey.SALES, text))


def _min_price(text: str) -> Predicate:
    return PriceAtLeast(_parse_float(CriterionKey.MIN_PRICE, text))


def _max_price(text: str) -> Predicate:
    return PriceAtMost(_parse_float(CriterionKey.MAX_PRICE, text))


def _model(text: str) -> Predicate | None:
    if not text.strip():
        return None
    return ModelContains(text)


def _segment(text: str) -> Predicate:
    try:
        return SegmentIs(Segment.parse(text))
    except ValueError:
        raise InvalidEnumError(CriterionKey.SEGMENT.value, text, allowed=Segment.tags()) from None


def _manufacturer(text: str) -> Predicate:
    return ManufacturerIs(text.strip())


_BUILDERS: dict[CriterionKey, Callable[[str], Predicate | None]] = {
    CriterionKey.SALES: _sales,
    CriterionKey.MIN_PRICE: _min_price,
    CriterionKey.MAX_PRICE: _max_price,
    CriterionKey.MODEL: _model,
    CriterionKey.SEGMENT: _segment,
    CriterionKey.MANUFACTURER: _manufacturer,
}


def _parse_sort(text: str) -> Sort:
    try:
        return Sort.parse(text)
    except ValueError:
        raise InvalidSortError(text, allowed=SORTABLE_FIELDS) from None


def compile_criteria(
    raw: RawCriteria,
    page_request: PageRequest | None = None,
    sort: Sequence[str] = (),
) -> QueryPlan:
    """Validate *raw* and turn every present criterion into a predicate.

    *sort* holds untrusted ``field[,asc|desc]`` texts; they are parsed after
    the criteria and appended to the sorts already in *page_request*.

    Raises
    ------
    InvalidNumberError
        ``sales``, ``minPrice`` or ``maxPrice`` is not a number, or ``sales``
        does not fit the ``car.sales`` column.
    InvalidEnumError
        ``segment`` is not one of :class:`Segment`.
    InvalidSortError
        a sort order has an unknown direction or names a field outside
        :data:`SORTABLE_FIELDS`.
    """
    page_request = page_request or PageRequest()
    predicates: list[Predicate] = []
    for key in CriterionKey:
        text = raw.get(key)
        if text is None:
            continue
        predicate = _BUILDERS[key](text)
        if predicate is not None:
            predicates.append(predicate)

    sorts = page_request.sorts + tuple(_parse_sort(text) for text in sort)
    for order in sorts:
        if order.field not in SORTABLE_FIELDS:
            raise InvalidSortError(order.field, allowed=SORTABLE_FIELDS)
    if sorts != page_request.sorts:
        page_request = dataclasses.replace(page_request, sorts=sorts)

    return QueryPlan(predicates=tuple(predicates), page_request=page_request)


class FilterCompiler:
    """Object façade over :func:`compile_criteria` for dependency injection."""

    def compile(
        self,
        raw: RawCriteria,
        page_request: PageRequest | None = None,
        sort: Sequence[str] = (),
    ) -> QueryPlan:
        plan = compile_criteria(raw, page_request, sort)
        _log.debug(
            "filter_compiled",
            criteria=[key.value for key in raw.present()],
            predicates=len(plan.predicates),
            page=plan.page_request.page,
            size=plan.page_request.size,
        )
        return plan


__all__ = ["SORTABLE_FIELDS", "FilterCompiler", "compile_criteria"]
