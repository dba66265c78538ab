"""Config – environment settings, table configuration and presets."""

from tablekit.config.settings import EnvSettingsLoader, Settings, SettingsLoader, TableKitSettings
from tablekit.config.table import (
    PRESETS,
    PaginationConfig,
    SortConfig,
    TableConfig,
    merge_configs,
    validate_table_config,
)
from tablekit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "PRESETS",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "PaginationConfig",
    "Settings",
    "SettingsLoader",
    "SortConfig",
    "TableConfig",
    "TableKitSettings",
    "merge_configs",
    "validate_table_config",
]
