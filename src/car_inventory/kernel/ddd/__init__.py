"""DDD building blocks – public re-export surface."""

from car_inventory.kernel.ddd.specification import (
    AndSpecification,
    BaseSpecification,
    MatchAll,
    all_of,
)

__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "MatchAll",
    "all_of",
]
