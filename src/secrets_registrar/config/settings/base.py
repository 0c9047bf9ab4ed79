"""Config settings – Settings base class and RegistrarSettings."""
from __future__ import annotations

import dataclasses
import logging

from secrets_registrar.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class RegistrarSettings(Settings):
    """Process-wide knobs for the registration bootstrap.

    ``tracing_enabled`` is ANDed with each provider's own ``tracing`` flag.
    """

    _prefix: dataclasses.ClassVar[str] = "SECRETS_REGISTRAR"

    log_level: str = "INFO"
    json_logs: bool = True
    tracing_enabled: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["RegistrarSettings", "Settings"]
