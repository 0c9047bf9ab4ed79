"""Kernel – error hierarchy, Result type, sensitive field names."""
from secrets_registrar.kernel.errors import ApplicationError, RegistrarError
from secrets_registrar.kernel.result import Err, Ok, Result
from secrets_registrar.kernel.security import DEFAULT_SENSITIVE_FIELDS

__all__ = ["ApplicationError", "DEFAULT_SENSITIVE_FIELDS", "Err", "Ok", "RegistrarError", "Result"]
