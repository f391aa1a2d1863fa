"""FastAPI adapter – alert and pagination response headers.

Alert headers tell a browser client what happened to an entity::

    X-carInventoryApp-alert: A new car is created with identifier 7
    X-carInventoryApp-params: 7

Failure alerts name the error key and the offending parameter::

    X-carInventoryApp-error: error.invalid_number
    X-carInventoryApp-params: sales

Pagination headers carry the filtered total and RFC 5988 links::

    X-Total-Count: 42
    Link: <...?page=1&size=20>; rel="next",<...?page=2&size=20>; rel="last",...
"""
from __future__ import annotations

from starlette.datastructures import URL

from car_inventory.application.pagination import Page


def alert_headers(app_name: str, message: str, param: str) -> dict[str, str]:
    return {f"X-{app_name}-alert": message, f"X-{app_name}-params": param}


def entity_created_headers(app_name: str, entity: str, identifier: object) -> dict[str, str]:
    return alert_headers(app_name, f"A new {entity} is created with identifier {identifier}", str(identifier))


def entity_updated_headers(app_name: str, entity: str, identifier: object) -> dict[str, str]:
    return alert_headers(app_name, f"A {entity} is updated with identifier {identifier}", str(identifier))


def entity_deleted_headers(app_name: str, entity: str, identifier: object) -> dict[str, str]:
    return alert_headers(app_name, f"A {entity} is deleted with identifier {identifier}", str(identifier))


def failure_alert_headers(app_name: str, error_key: str, param: str) -> dict[str, str]:
    return {f"X-{app_name}-error": f"error.{error_key}", f"X-{app_name}-params": param}


def pagination_headers(page: Page[object], url: URL) -> dict[str, str]:
    """Build ``X-Total-Count`` and ``Link`` headers for *page*.

    Links keep every other query parameter of *url* (the active filters).
    """

    def link(number: int, rel: str) -> str:
        target = url.include_query_params(page=number, size=page.size)
        return f'<{target}>; rel="{rel}"'

    last_page = max(page.total_pages - 1, 0)
    links: list[str] = []
    if page.has_next:
        links.append(link(page.page + 1, "next"))
    if page.has_previous:
        links.append(link(page.page - 1, "prev"))
    links.append(link(last_page, "last"))
    links.append(link(0, "first"))
    return {"X-Total-Count": str(page.total), "Link": ",".join(links)}


__all__ = [
    "alert_headers",
    "entity_created_headers",
    "entity_deleted_headers",
    "entity_updated_headers",
    "failure_alert_headers",
    "pagination_headers",
]
