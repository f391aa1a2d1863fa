"""In-memory adapter – reference store for tests and local runs."""
from car_inventory.adapters.memory.store import InMemoryCarStore

__all__ = ["InMemoryCarStore"]
