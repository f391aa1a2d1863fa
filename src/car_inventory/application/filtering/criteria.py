"""Filtering – CriterionKey and RawCriteria."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Mapping

from car_inventory.kernel.errors import UnknownCriterionError


class CriterionKey(str, Enum):
    """Recognised search criteria, in the order the compiler processes them.

    Values are the names callers use on the wire (query-string keys).
    """

    SALES = "sales"
    MIN_PRICE = "minPrice"
    MAX_PRICE = "maxPrice"
    MODEL = "model"
    SEGMENT = "segment"
    MANUFACTURER = "manufacturer"


_ATTRIBUTES: dict[CriterionKey, str] = {
    CriterionKey.SALES: "sales",
    CriterionKey.MIN_PRICE: "min_price",
    CriterionKey.MAX_PRICE: "max_price",
    CriterionKey.MODEL: "model",
    CriterionKey.SEGMENT: "segment",
    CriterionKey.MANUFACTURER: "manufacturer",
}


@dataclasses.dataclass(frozen=True)
class RawCriteria:
    """Untrusted, optional, textual search criteria for one request.

    ``None`` means the caller supplied no constraint for that criterion.
    """

    sales: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    model: str | None = None
    segment: str | None = None
    manufacturer: str | None = None

    def get(self, key: CriterionKey) -> str | None:
        return getattr(self, _ATTRIBUTES[key])

    def present(self) -> list[CriterionKey]:
        """Keys that carry a value, in processing order."""
        return [key for key in CriterionKey if self.get(key) is not None]

    def is_empty(self) -> bool:
        return not self.present()

    @classmethod
    def from_mapping(cls, values: Mapping[str, str | None]) -> "RawCriteria":
        """Build criteria from a name → value mapping.

        Keys may be :class:`CriterionKey` members or their wire names.
        Raises :class:`UnknownCriterionError` for any other key.
        """
        kwargs: dict[str, str | None] = {}
        for name, value in values.items():
            try:
                key = CriterionKey(name)
            except ValueError:
                raise UnknownCriterionError(str(name)) from None
            kwargs[_ATTRIBUTES[key]] = value
        return cls(**kwargs)


__all__ = ["CriterionKey", "RawCriteria"]
