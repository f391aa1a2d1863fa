"""Application pagination – page/sort primitives."""
from car_inventory.application.pagination.page_request import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    PageRequest,
    Sort,
    SortDirection,
)
from car_inventory.application.pagination.page import Page

__all__ = ["MAX_PAGE", "MAX_PAGE_SIZE", "Page", "PageRequest", "Sort", "SortDirection"]
