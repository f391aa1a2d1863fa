"""FastAPI adapter – request/response bodies for cars."""
from __future__ import annotations

from pydantic import BaseModel, Field

from car_inventory.domain import MAX_SALES, Car, Manufacturer, Segment


class ManufacturerSchema(BaseModel):
    id: int | None = None
    name: str = Field(min_length=1, max_length=255)
    country: str | None = None

    def to_domain(self) -> Manufacturer:
        return Manufacturer(id=self.id, name=self.name, country=self.country)

    @classmethod
    def from_domain(cls, manufacturer: Manufacturer) -> "ManufacturerSchema":
        return cls(id=manufacturer.id, name=manufacturer.name, country=manufacturer.country)


class CarSchema(BaseModel):
    id: int | None = None
    model: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0)
    sales: int = Field(default=0, ge=0, le=MAX_SALES)
    segment: Segment
    manufacturer: ManufacturerSchema | None = None

    def to_domain(self) -> Car:
        return Car(
            id=self.id,
            model=self.model,
            price=self.price,
            sales=self.sales,
            segment=self.segment,
            manufacturer=self.manufacturer.to_domain() if self.manufacturer else None,
        )

    @classmethod
    def from_domain(cls, car: Car) -> "CarSchema":
        return cls(
            id=car.id,
            model=car.model,
            price=car.price,
            sales=car.sales,
            segment=car.segment,
            manufacturer=(
                ManufacturerSchema.from_domain(car.manufacturer) if car.manufacturer else None
            ),
        )


__all__ = ["CarSchema", "ManufacturerSchema"]
