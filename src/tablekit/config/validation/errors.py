"""Config validation – errors raised while building TableKitSettings."""
from __future__ import annotations

from typing import Any

from tablekit.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded from the environment."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used.

    ``setting_name`` is the environment variable when the raw text failed to
    coerce, or the settings field when cross-field validation rejected it.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            setting=setting_name,
            value=value,
            reason=reason,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
