"""Kernel error hierarchy.

Hierarchy::

    RegistrarError
    └── ApplicationError
        └── ConfigError                    (config/validation/errors.py)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            └── RegistrationError          (providers/errors.py)
"""

from __future__ import annotations

import json
from typing import Any


class RegistrarError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context, must be JSON-serialisable and free of secrets.
        cause: Original exception that triggered this error.
    """

    default_code: str = "registrar_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class ApplicationError(RegistrarError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError", "RegistrarError"]
