"""Config settings – dataclass settings and env-based loaders."""
from secrets_registrar.config.settings.base import RegistrarSettings, Settings
from secrets_registrar.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    coerce_value,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "RegistrarSettings",
    "Settings",
    "SettingsLoader",
    "coerce_value",
]
