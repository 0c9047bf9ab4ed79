"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from dotenv import load_dotenv

from secrets_registrar.config.settings.base import Settings
from secrets_registrar.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _expects_str(type_hint: Any) -> bool:
    if type_hint is str:
        return True
    if isinstance(type_hint, str):
        return type_hint.replace(" ", "") in ("str", "str|None", "None|str", "Optional[str]")
    args = typing.get_args(type_hint)
    return str in args and set(args) <= {str, type(None)}


def coerce_value(name: str, value: Any, type_hint: Any) -> Any:  # noqa: PLR0911
    """Coerce a raw (usually string) configuration value into *type_hint*.

    Only strings coming from the environment or loosely typed mappings are
    converted. Other values are returned untouched, except that a string
    field refuses a non-string value.
    """
    if not isinstance(value, str):
        if value is not None and _expects_str(type_hint):
            raise InvalidSettingValueError(name, type(value).__name__, "expected a string")
        return value
    hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
    origin = typing.get_origin(type_hint)
    if type_hint is bool or hint == "bool":
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise InvalidSettingValueError(name, value, "expected a boolean")
    try:
        if type_hint is int or hint == "int":
            return int(value)
        if type_hint is float or hint == "float":
            return float(value)
    except ValueError as exc:
        raise InvalidSettingValueError(name, value, f"expected {hint}") from exc
    if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is not dataclasses.MISSING
        or field.default_factory is not dataclasses.MISSING  # type: ignore[misc]
    )


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables named ``<PREFIX>_<FIELD>``."""

    def __init__(self, environ: typing.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if not _has_default(field):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = coerce_value(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file, then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "coerce_value"]
