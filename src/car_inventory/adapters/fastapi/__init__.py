"""FastAPI adapter – routers, exception mapper, middleware and app factory."""
from car_inventory.adapters.fastapi.app import create_app
from car_inventory.adapters.fastapi.deps import criteria_dep, make_pagination_dep, sort_dep
from car_inventory.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from car_inventory.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from car_inventory.adapters.fastapi.routers import CarRouter, HealthRouter
from car_inventory.adapters.fastapi.schemas import CarSchema, ManufacturerSchema

__all__ = [
    "CarRouter",
    "CarSchema",
    "FastAPICorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "HealthRouter",
    "ManufacturerSchema",
    "create_app",
    "criteria_dep",
    "make_pagination_dep",
    "sort_dep",
]
