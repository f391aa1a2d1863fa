"""FastAPI adapter – application factory."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from fastapi import FastAPI

from car_inventory.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from car_inventory.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from car_inventory.adapters.fastapi.routers import CarRouter, HealthRouter
from car_inventory.adapters.sqlalchemy import SqlAlchemyCarStore, SqlAlchemySessionFactory, create_schema
from car_inventory.application.filtering import CarStore
from car_inventory.config import AppSettings, EnvSettingsLoader
from car_inventory.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def create_app(settings: AppSettings | None = None, store: CarStore | None = None) -> FastAPI:
    """Build the car inventory API.

    Without *settings* they are read from ``CAR_INVENTORY_*`` environment
    variables. Without *store* a :class:`SqlAlchemyCarStore` is created
    for ``settings.database_url``; its tables are created on startup and
    its engine disposed on shutdown.
    """
    settings = settings or EnvSettingsLoader().load(AppSettings)
    JsonLoggerFactory.configure(settings.log_level, json=settings.json_logs)

    sessions: SqlAlchemySessionFactory | None = None
    if store is None:
        sessions = SqlAlchemySessionFactory(settings.database_url)
        store = SqlAlchemyCarStore(sessions)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        if sessions is not None:
            await create_schema(sessions.engine)
        _log.info("app_started", app_name=settings.app_name)
        yield
        if sessions is not None:
            await sessions.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.add_middleware(FastAPICorrelationIdMiddleware)
    FastAPIExceptionMapper(settings.app_name).register(app)
    app.include_router(CarRouter(store, settings))
    app.include_router(HealthRouter(store))
    app.state.store = store
    app.state.settings = settings
    return app


__all__ = ["create_app"]
