"""Application pagination – PageRequest, Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum

MAX_PAGE_SIZE = 1000
# keeps page * size within a 64-bit SQL OFFSET
MAX_PAGE = 2**31 - 1


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, text: str) -> "Sort":
        """Parse ``field`` or ``field,asc|desc`` (direction case-insensitive)."""
        name, _, direction = text.partition(",")
        direction = direction.strip().upper() or SortDirection.ASC.value
        try:
            return cls(field=name.strip(), direction=SortDirection(direction))
        except ValueError:
            raise ValueError(f"invalid sort direction in {text!r}") from None


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters; ``page`` is zero-based."""
    page: int = 0
    size: int = 20
    sorts: tuple[Sort, ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.page <= MAX_PAGE:
            raise ValueError(f"page must be between 0 and {MAX_PAGE}")
        if self.size < 1 or self.size > MAX_PAGE_SIZE:
            raise ValueError(f"size must be between 1 and {MAX_PAGE_SIZE}")


__all__ = ["MAX_PAGE", "MAX_PAGE_SIZE", "PageRequest", "Sort", "SortDirection"]
