"""Config – registrar settings, loaders, validation errors and secret store ports."""

from secrets_registrar.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RegistrarSettings,
    Settings,
    SettingsLoader,
)
from secrets_registrar.config.secrets import KubernetesSecretStore, SecretRef, SecretStore
from secrets_registrar.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "KubernetesSecretStore",
    "MissingRequiredSettingError",
    "RegistrarSettings",
    "SecretRef",
    "SecretStore",
    "Settings",
    "SettingsLoader",
]
