"""Config secrets – SecretRef and SecretStore port.

A ``SecretStore`` is what a provider's activation hook adds to the
configuration target; reading values through it is the store's concern,
never the registrar's.
"""
from __future__ import annotations

import abc
import dataclasses


@dataclasses.dataclass(frozen=True)
class SecretRef:
    """Reference to a secret stored externally."""
    path: str
    key: str
    version: str | None = None

    def __str__(self) -> str:
        return f"{self.path}/{self.key}"


class SecretStore(abc.ABC):
    """Port: retrieve secrets from a backend."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abc.abstractmethod
    async def get(self, ref: SecretRef) -> str: ...

    @abc.abstractmethod
    async def get_all(self, path: str) -> dict[str, str]: ...


__all__ = ["SecretRef", "SecretStore"]
