"""Observability – correlation and structured logging."""

from car_inventory.observability.correlation import CorrelationContext, RequestContext
from car_inventory.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["CorrelationContext", "JsonLoggerFactory", "RequestContext", "get_logger"]
