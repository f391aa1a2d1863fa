"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── FilterError  (filters.py)
    │   │       ├── InvalidNumberError
    │   │       ├── InvalidEnumError
    │   │       ├── InvalidSortError
    │   │       └── UnknownCriterionError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── StoreError
"""

from car_inventory.kernel.errors.application import ApplicationError
from car_inventory.kernel.errors.base import BaseError
from car_inventory.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from car_inventory.kernel.errors.filters import (
    FilterError,
    InvalidEnumError,
    InvalidNumberError,
    InvalidSortError,
    UnknownCriterionError,
)
from car_inventory.kernel.errors.infrastructure import InfrastructureError, StoreError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FilterError",
    "InfrastructureError",
    "InvalidEnumError",
    "InvalidNumberError",
    "InvalidSortError",
    "NotFoundError",
    "StoreError",
    "UnknownCriterionError",
    "ValidationError",
]
