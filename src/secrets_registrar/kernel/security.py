"""Kernel security – field names whose values never reach a log line."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "endpoint", "connection_string", "connectionstring", "url", "uri",
    "token", "password", "passwd", "secret", "api_key", "apikey", "authorization",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
