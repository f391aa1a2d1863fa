"""Observability – structured logging helpers."""
from car_inventory.observability.logging.processors import CorrelationProcessor, get_logger
from car_inventory.observability.logging.factory import JsonLoggerFactory

__all__ = ["CorrelationProcessor", "JsonLoggerFactory", "get_logger"]
