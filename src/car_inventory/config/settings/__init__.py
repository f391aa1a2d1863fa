"""Config settings – 12-factor env-based configuration."""
from car_inventory.config.settings.base import Settings
from car_inventory.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from car_inventory.config.settings.app import AppSettings

__all__ = ["AppSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
