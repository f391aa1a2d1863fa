"""Domain records – Car, Manufacturer and the Segment enumeration."""
from __future__ import annotations

import dataclasses
from enum import Enum

# ``car.sales`` is stored in a 32-bit integer column
MIN_SALES = -(2**31)
MAX_SALES = 2**31 - 1


class Segment(str, Enum):
    """Market segment a car is sold in."""

    MINI = "MINI"
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    EXECUTIVE = "EXECUTIVE"
    LUXURY = "LUXURY"
    SPORT = "SPORT"
    SUV = "SUV"
    MPV = "MPV"

    @classmethod
    def parse(cls, text: str) -> "Segment":
        """Return the segment tagged *text* (case-insensitive).

        Raises :class:`ValueError` when *text* is not a known tag.
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"{text!r} is not a valid segment") from None

    @classmethod
    def tags(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclasses.dataclass(frozen=True)
class Manufacturer:
    name: str
    id: int | None = None
    country: str | None = None


@dataclasses.dataclass(frozen=True)
class Car:
    """A car held in inventory."""

    model: str
    price: float
    sales: int
    segment: Segment
    manufacturer: Manufacturer | None = None
    id: int | None = None

    def with_id(self, car_id: int) -> "Car":
        return dataclasses.replace(self, id=car_id)


__all__ = ["MAX_SALES", "MIN_SALES", "Car", "Manufacturer", "Segment"]
