"""FastAPI adapter – car search/CRUD and health routers."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from car_inventory.adapters.fastapi.deps import criteria_dep, make_pagination_dep, sort_dep
from car_inventory.adapters.fastapi.headers import (
    entity_created_headers,
    entity_deleted_headers,
    entity_updated_headers,
    pagination_headers,
)
from car_inventory.adapters.fastapi.schemas import CarSchema
from car_inventory.application.filtering import CarSearchService, CarStore, RawCriteria
from car_inventory.application.pagination import PageRequest
from car_inventory.config import AppSettings
from car_inventory.kernel.errors import ValidationError
from car_inventory.observability.logging import get_logger

_log = get_logger(__name__)

ENTITY_NAME = "car"


def CarRouter(store: CarStore, settings: AppSettings) -> APIRouter:
    """Return the ``/api`` router for cars.

    Parameters
    ----------
    store:
        Record store backing every endpoint.
    settings:
        Supplies page-size bounds and the application name used in alert headers.
    """
    router = APIRouter(prefix="/api", tags=["cars"])
    search = CarSearchService(store)
    pagination = make_pagination_dep(settings)
    app_name = settings.app_name

    @router.get("/car/byfilters", response_model=list[CarSchema])
    async def get_cars_by_filters(
        request: Request,
        response: Response,
        criteria: RawCriteria = Depends(criteria_dep),
        page_request: PageRequest = Depends(pagination),
        sort: tuple[str, ...] = Depends(sort_dep),
    ) -> list[CarSchema]:
        """Filtered, paginated car search; the total count reflects the filters."""
        page = await search.search(criteria, page_request, sort)
        response.headers.update(pagination_headers(page, request.url))
        return [CarSchema.from_domain(car) for car in page.items]

    @router.post("/cars", status_code=201, response_model=CarSchema)
    async def create_car(body: CarSchema, response: Response) -> CarSchema:
        _log.debug("rest_request", action="create_car", car=body.model_dump())
        if body.id is not None:
            raise ValidationError(
                "A new car cannot already have an ID",
                code="idexists",
                detail={"field": ENTITY_NAME},
            )
        car = await store.save(body.to_domain())
        response.headers["Location"] = f"/api/cars/{car.id}"
        response.headers.update(entity_created_headers(app_name, ENTITY_NAME, car.id))
        return CarSchema.from_domain(car)

    @router.put("/cars", response_model=CarSchema)
    async def update_car(body: CarSchema, response: Response) -> Any:
        _log.debug("rest_request", action="update_car", car=body.model_dump())
        if body.id is None:
            car = await store.save(body.to_domain())
            headers = {"Location": f"/api/cars/{car.id}"}
            headers.update(entity_created_headers(app_name, ENTITY_NAME, car.id))
            return JSONResponse(
                status_code=201,
                content=CarSchema.from_domain(car).model_dump(mode="json"),
                headers=headers,
            )
        car = await store.save(body.to_domain())
        response.headers.update(entity_updated_headers(app_name, ENTITY_NAME, car.id))
        return CarSchema.from_domain(car)

    @router.get("/cars", response_model=list[CarSchema])
    async def get_all_cars() -> list[CarSchema]:
        _log.debug("rest_request", action="get_all_cars")
        return [CarSchema.from_domain(car) for car in await store.list_all()]

    @router.get("/cars/{car_id}", response_model=CarSchema)
    async def get_car(car_id: int) -> CarSchema:
        _log.debug("rest_request", action="get_car", car_id=car_id)
        return CarSchema.from_domain(await store.get_or_raise(car_id))

    @router.delete("/cars/{car_id}")
    async def delete_car(car_id: int) -> Response:
        _log.debug("rest_request", action="delete_car", car_id=car_id)
        await store.delete(car_id)
        return Response(status_code=200, headers=entity_deleted_headers(app_name, ENTITY_NAME, car_id))

    return router


def HealthRouter(store: CarStore, path: str = "/health") -> APIRouter:
    """Return liveness and readiness probes.

    Readiness runs an unfiltered ``count`` against *store* and reports 503
    when the store cannot answer.
    """
    router = APIRouter(tags=["ops"])

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        try:
            await store.count(())
            ok = True
        except Exception as exc:  # noqa: BLE001
            _log.warning("readiness_failed", error=repr(exc))
            ok = False
        return JSONResponse(
            status_code=200 if ok else 503,
            content={"status": "ok" if ok else "degraded", "checks": {"store": ok}},
        )

    return router


__all__ = ["CarRouter", "ENTITY_NAME", "HealthRouter"]
