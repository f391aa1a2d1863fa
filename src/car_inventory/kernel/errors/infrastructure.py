"""Infrastructure errors – I/O failures of the record store."""

from __future__ import annotations

from typing import Any

from car_inventory.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """The record store could not complete a query.

    Raised by store adapters and propagated unchanged by the search
    pipeline. Callers own any retry policy.
    """

    default_code = "store_failure"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Record store failed during '{operation}'", **kwargs)
        self.operation = operation


__all__ = ["InfrastructureError", "StoreError"]
