"""Config settings – environment-driven configuration."""
from tablekit.config.settings.base import Settings
from tablekit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from tablekit.config.settings.tablekit import TableKitSettings

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "TableKitSettings"]
