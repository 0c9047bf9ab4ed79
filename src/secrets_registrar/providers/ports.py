"""Providers – the provider contract and its collaborator ports.

A concrete provider is any value exposing::

    provider_type           ProviderType | str
    provider_name           str
    activity_source_names   Sequence[str]
    validate_settings(settings)
    add_instance(settings, services, configuration)

``SecretsProviderBase`` and ``SimpleSecretsProvider`` are two ready-made
ways of satisfying it.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from secrets_registrar.config.secrets import SecretStore
from secrets_registrar.providers.settings import InstanceSettings, ProviderType

I = TypeVar("I", bound=InstanceSettings)


@runtime_checkable
class ServiceTarget(Protocol):
    """Port: where an activation hook registers services."""

    def add(self, name: str, service: Any) -> None: ...


@runtime_checkable
class ConfigurationTarget(Protocol):
    """Port: where an activation hook adds configuration sources."""

    def add_source(self, source: SecretStore, name: str | None = None) -> None: ...


@runtime_checkable
class SecretsProvider(Protocol[I]):
    """Capability interface every provider satisfies."""

    @property
    def provider_type(self) -> ProviderType | str: ...

    @property
    def provider_name(self) -> str: ...

    @property
    def activity_source_names(self) -> Sequence[str]: ...

    def validate_settings(self, settings: I) -> Any: ...

    def add_instance(self, settings: I, services: ServiceTarget, configuration: ConfigurationTarget) -> None: ...


class SecretsProviderBase(abc.ABC, Generic[I]):
    """Convenience base: no provider-specific validation, no activity sources."""

    provider_type: ProviderType | str = ProviderType.SECRETS
    provider_name: str = ""
    activity_source_names: Sequence[str] = ()

    def validate_settings(self, settings: I) -> None:  # noqa: ARG002
        return None

    @abc.abstractmethod
    def add_instance(self, settings: I, services: ServiceTarget, configuration: ConfigurationTarget) -> None: ...


def _accept(settings: Any) -> None:  # noqa: ARG001
    return None


@dataclasses.dataclass(frozen=True)
class SimpleSecretsProvider(Generic[I]):
    """A provider assembled from plain callables.

    Example::

        provider = SimpleSecretsProvider(
            provider_name="Env",
            add_instance=lambda settings, services, configuration: ...,
        )
    """

    provider_name: str
    add_instance: Callable[[I, ServiceTarget, ConfigurationTarget], None]
    provider_type: ProviderType | str = ProviderType.SECRETS
    activity_source_names: Sequence[str] = ()
    validate_settings: Callable[[I], Any] = _accept


__all__ = [
    "ConfigurationTarget",
    "SecretsProvider",
    "SecretsProviderBase",
    "ServiceTarget",
    "SimpleSecretsProvider",
]
