"""Config settings – 12-factor env-based configuration."""
from tableview.config.settings.base import Settings
from tableview.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from tableview.config.settings.table import TableSettings, load_settings

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "TableSettings", "load_settings"]
