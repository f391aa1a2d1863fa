"""Filtering – QueryPlan."""
from __future__ import annotations

import dataclasses

from car_inventory.application.filtering.predicates import Predicate
from car_inventory.application.pagination import PageRequest


@dataclasses.dataclass(frozen=True)
class QueryPlan:
    """Validated predicates plus pagination for exactly one search.

    Predicates are combined with logical AND; their order only reflects
    the order criteria were compiled in.
    """

    predicates: tuple[Predicate, ...]
    page_request: PageRequest = dataclasses.field(default_factory=PageRequest)

    @property
    def is_unfiltered(self) -> bool:
        return not self.predicates


__all__ = ["QueryPlan"]
