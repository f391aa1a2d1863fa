"""Domain – inventory records."""
from car_inventory.domain.car import MAX_SALES, MIN_SALES, Car, Manufacturer, Segment

__all__ = ["MAX_SALES", "MIN_SALES", "Car", "Manufacturer", "Segment"]
