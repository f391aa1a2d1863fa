"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from car_inventory.adapters.fastapi.headers import failure_alert_headers
from car_inventory.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from car_inventory.observability.correlation import CorrelationContext
from car_inventory.observability.logging import get_logger

_log = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register car_inventory error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "invalid_number", "message": "...", "detail": {...}, "correlation_id": "..."}

    Mappings
    --------
    ``ValidationError``     → 400 (``FilterError`` included, with failure-alert headers)
    ``NotFoundError``       → 404
    ``StoreError``          → 503
    ``InfrastructureError`` → 503
    ``DomainError``         → 422
    """

    def __init__(self, app_name: str = "carInventoryApp") -> None:
        self._app_name = app_name
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (StoreError, 503),
            (InfrastructureError, 503),
            (DomainError, 422),
        ]

    def _headers(self, exc: Exception) -> dict[str, str]:
        if isinstance(exc, ValidationError):
            return failure_alert_headers(self._app_name, exc.code, str(exc.detail.get("field", "")))
        return {}

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""

        def make_handler(code: int) -> Callable[[Any, Any], Any]:
            def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                ctx = CorrelationContext.get()

                if isinstance(exc, BaseError):
                    body = exc.to_dict()
                else:
                    body = {"code": "error", "message": str(exc)}
                body["correlation_id"] = ctx.correlation_id if ctx is not None else None

                if code >= 500:
                    _log.error("request_failed", status=code, error=body["code"])
                else:
                    _log.info("request_rejected", status=code, error=body["code"])
                return JSONResponse(status_code=code, content=body, headers=self._headers(exc))

            return handler

        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
