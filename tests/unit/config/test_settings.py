"""Unit tests for settings and env/dotenv loaders."""

from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from secrets_registrar.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RegistrarSettings,
    Settings,
    coerce_value,
)
from secrets_registrar.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    ratio: float = 0.5
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    database_url: str


@dataclass
class CheckedSettings(Settings):
    _prefix: ClassVar[str] = "CHK"

    port: int = 1

    def _validate(self) -> None:
        if self.port <= 0:
            raise ValueError("port must be positive")


# ---------------------------------------------------------------------------
# coerce_value
# ---------------------------------------------------------------------------


class TestCoerceValue:
    def test_non_strings_pass_through(self) -> None:
        assert coerce_value("x", 5, "bool") == 5

    def test_bool_from_string_annotation(self) -> None:
        assert coerce_value("x", "yes", "bool") is True
        assert coerce_value("x", "off", "bool") is False

    def test_bool_from_type(self) -> None:
        assert coerce_value("x", "1", bool) is True

    def test_invalid_bool_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            coerce_value("x", "maybe", bool)

    def test_int_and_float(self) -> None:
        assert coerce_value("x", "42", "int") == 42
        assert coerce_value("x", "1.5", float) == 1.5

    def test_invalid_int_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            coerce_value("PORT", "abc", int)
        assert exc_info.value.setting_name == "PORT"

    def test_list_splits_on_commas(self) -> None:
        assert coerce_value("x", "a, b,,c", "list[str]") == ["a", "b", "c"]

    def test_optional_string_untouched(self) -> None:
        assert coerce_value("x", "value", "str | None") == "value"

    def test_string_field_rejects_other_types(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            coerce_value("x", 8200, "str")
        with pytest.raises(InvalidSettingValueError):
            coerce_value("x", ["a"], str | None)

    def test_string_field_accepts_none(self) -> None:
        assert coerce_value("x", None, "str | None") is None


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings == AppSettings()

    def test_loads_all_types(self) -> None:
        environ = {
            "APP_HOST": "example.com",
            "APP_PORT": "9000",
            "APP_DEBUG": "true",
            "APP_RATIO": "0.25",
            "APP_ALLOWED_ORIGINS": "a.com,b.com",
        }
        settings = EnvSettingsLoader(environ).load(AppSettings)
        assert settings.host == "example.com"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.ratio == 0.25
        assert settings.allowed_origins == ["a.com", "b.com"]

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "from-env")
        assert EnvSettingsLoader().load(AppSettings).host == "from-env"

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_DATABASE_URL"

    def test_construction_failure_wrapped_in_config_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader({"CHK_PORT": "0"}).load(CheckedSettings)
        assert isinstance(exc_info.value.cause, ValueError)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_values_from_env_file(self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("APP_HOST", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("APP_HOST=dotenv-host\n")
        settings = DotenvSettingsLoader(str(env_file)).load(AppSettings)
        assert settings.host == "dotenv-host"
        monkeypatch.delenv("APP_HOST", raising=False)

    def test_existing_env_wins_without_override(self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "1111")
        env_file = tmp_path / ".env"
        env_file.write_text("APP_PORT=2222\n")
        settings = DotenvSettingsLoader(str(env_file)).load(AppSettings)
        assert settings.port == 1111


# ---------------------------------------------------------------------------
# RegistrarSettings
# ---------------------------------------------------------------------------


class TestRegistrarSettings:
    def test_defaults(self) -> None:
        settings = RegistrarSettings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.tracing_enabled is True

    def test_prefix(self) -> None:
        environ = {
            "SECRETS_REGISTRAR_LOG_LEVEL": "debug",
            "SECRETS_REGISTRAR_TRACING_ENABLED": "false",
        }
        settings = EnvSettingsLoader(environ).load(RegistrarSettings)
        assert settings.log_level == "DEBUG"
        assert settings.tracing_enabled is False

    def test_log_level_number(self) -> None:
        assert RegistrarSettings(log_level="warning").log_level_number == 30

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RegistrarSettings(log_level="LOUD")
        assert exc_info.value.setting_name == "log_level"

    def test_env_loader_reraises_config_errors_unwrapped(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SECRETS_REGISTRAR_LOG_LEVEL": "LOUD"}).load(RegistrarSettings)
