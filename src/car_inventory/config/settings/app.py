"""Config settings – AppSettings for the car inventory service."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from car_inventory.application.pagination import MAX_PAGE_SIZE
from car_inventory.config.settings.base import Settings
from car_inventory.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class AppSettings(Settings):
    """Service configuration, read from ``CAR_INVENTORY_*`` variables."""

    _prefix: ClassVar[str] = "CAR_INVENTORY"

    database_url: str = "sqlite+aiosqlite:///:memory:"
    default_page_size: int = 20
    max_page_size: int = MAX_PAGE_SIZE
    log_level: str = "INFO"
    json_logs: bool = True
    app_name: str = "carInventoryApp"

    def _validate(self) -> None:
        if not 1 <= self.max_page_size <= MAX_PAGE_SIZE:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, f"must be between 1 and {MAX_PAGE_SIZE}"
            )
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must be between 1 and max_page_size"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["AppSettings"]
