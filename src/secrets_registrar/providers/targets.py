"""Providers – in-memory ServiceCollection and ConfigurationBuilder targets."""
from __future__ import annotations

import dataclasses
import threading
from typing import Any, Iterator

from secrets_registrar.config.secrets import SecretStore
from secrets_registrar.config.validation import ConfigError


class ServiceCollection:
    """Named services registered by activation hooks."""

    def __init__(self) -> None:
        self._services: dict[str, Any] = {}
        self._lock = threading.Lock()

    def add(self, name: str, service: Any) -> None:
        with self._lock:
            if name in self._services:
                raise ConfigError(f"Service '{name}' is already registered", detail={"service": name})
            self._services[name] = service

    def get(self, name: str) -> Any:
        with self._lock:
            return self._services[name]

    def names(self) -> list[str]:
        with self._lock:
            return list(self._services)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._services

    def __len__(self) -> int:
        with self._lock:
            return len(self._services)


@dataclasses.dataclass(frozen=True)
class ConfigurationSource:
    name: str
    store: SecretStore


class ConfigurationBuilder:
    """Ordered configuration sources; later sources take precedence."""

    def __init__(self) -> None:
        self._sources: list[ConfigurationSource] = []
        self._lock = threading.Lock()

    def add_source(self, source: SecretStore, name: str | None = None) -> None:
        with self._lock:
            self._sources.append(ConfigurationSource(name=name or source.name, store=source))

    @property
    def sources(self) -> tuple[ConfigurationSource, ...]:
        with self._lock:
            return tuple(self._sources)

    def source(self, name: str) -> SecretStore:
        for entry in reversed(self.sources):
            if entry.name == name:
                return entry.store
        raise KeyError(name)

    def __iter__(self) -> Iterator[ConfigurationSource]:
        return iter(self.sources)

    def __len__(self) -> int:
        return len(self.sources)


__all__ = ["ConfigurationBuilder", "ConfigurationSource", "ServiceCollection"]
