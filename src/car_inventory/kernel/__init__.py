"""Kernel – framework-agnostic building blocks."""

from car_inventory.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    FilterError,
    InfrastructureError,
    NotFoundError,
    StoreError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FilterError",
    "InfrastructureError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]
