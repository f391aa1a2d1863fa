"""SQLAlchemy adapter – ORM rows, session factory and the car store."""
from car_inventory.adapters.sqlalchemy.models import Base, CarRow, ManufacturerRow, create_schema
from car_inventory.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from car_inventory.adapters.sqlalchemy.store import SqlAlchemyCarStore, to_clause

__all__ = [
    "Base",
    "CarRow",
    "ManufacturerRow",
    "SqlAlchemyCarStore",
    "SqlAlchemySessionFactory",
    "create_schema",
    "to_clause",
]
