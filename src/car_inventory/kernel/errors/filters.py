"""Filter errors – a search criterion that cannot become a predicate.

Every filter error names exactly one offending field in ``detail["field"]``
so callers can surface a single, unambiguous message.
"""

from __future__ import annotations

from typing import Any, Iterable

from car_inventory.kernel.errors.domain import ValidationError


class FilterError(ValidationError):
    """Base class for search criteria that fail validation."""

    default_code = "invalid_filter"

    def __init__(
        self,
        field: str,
        message: str,
        *,
        value: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = {"field": field}
        if value is not None:
            detail["value"] = value
        super().__init__(
            message,
            errors=[{"field": field, "message": message}],
            detail=detail,
            **kwargs,
        )
        self.field = field
        self.value = value


class InvalidNumberError(FilterError):
    """A criterion expected to be numeric failed to parse."""

    default_code = "invalid_number"

    def __init__(self, field: str, value: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            field,
            f"'{field}' must be numeric",
            value=value,
            **kwargs,
        )


class InvalidEnumError(FilterError):
    """A criterion expected to match a closed set of values did not."""

    default_code = "invalid_enum"

    def __init__(
        self,
        field: str,
        value: str | None = None,
        *,
        allowed: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        self.allowed: tuple[str, ...] = tuple(allowed)
        message = f"'{field}' must be one of the accepted values"
        if self.allowed:
            message = f"'{field}' must be one of: {', '.join(self.allowed)}"
        super().__init__(field, message, value=value, **kwargs)
        self.detail["allowed"] = list(self.allowed)


class InvalidSortError(FilterError):
    """A sort order names a field that results cannot be ordered by."""

    default_code = "invalid_sort"

    def __init__(
        self,
        value: str,
        *,
        allowed: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        self.allowed: tuple[str, ...] = tuple(allowed)
        super().__init__(
            "sort",
            f"cannot sort by '{value}'",
            value=value,
            **kwargs,
        )
        self.detail["allowed"] = list(self.allowed)


class UnknownCriterionError(FilterError):
    """A criteria mapping carried a key outside the recognised set."""

    default_code = "unknown_criterion"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(name, f"'{name}' is not a recognised search criterion", **kwargs)


__all__ = [
    "FilterError",
    "InvalidEnumError",
    "InvalidNumberError",
    "InvalidSortError",
    "UnknownCriterionError",
]
