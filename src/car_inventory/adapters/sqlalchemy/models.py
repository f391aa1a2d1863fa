"""SQLAlchemy adapter – ORM rows for manufacturers and cars."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from car_inventory.domain import Car, Manufacturer, Segment


class Base(DeclarativeBase):
    pass


class ManufacturerRow(Base):
    __tablename__ = "manufacturer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    def to_domain(self) -> Manufacturer:
        return Manufacturer(id=self.id, name=self.name, country=self.country)


class CarRow(Base):
    """``car`` table; the manufacturer is loaded eagerly with ``selectin``."""

    __tablename__ = "car"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    sales: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    segment: Mapped[Segment] = mapped_column(Enum(Segment, name="segment"), nullable=False, index=True)
    manufacturer_id: Mapped[int | None] = mapped_column(
        ForeignKey("manufacturer.id"), nullable=True, index=True
    )
    manufacturer: Mapped[ManufacturerRow | None] = relationship(lazy="selectin")

    def to_domain(self) -> Car:
        return Car(
            id=self.id,
            model=self.model,
            price=self.price,
            sales=self.sales,
            segment=self.segment,
            manufacturer=self.manufacturer.to_domain() if self.manufacturer is not None else None,
        )

    def assign(self, car: Car, manufacturer: ManufacturerRow | None) -> None:
        self.model = car.model
        self.price = car.price
        self.sales = car.sales
        self.segment = car.segment
        self.manufacturer = manufacturer


async def create_schema(bind: Any) -> None:
    """Create the ``manufacturer`` and ``car`` tables if they do not exist.

    *bind* should be an :class:`~sqlalchemy.ext.asyncio.AsyncEngine`.
    """
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = ["Base", "CarRow", "ManufacturerRow", "create_schema"]
