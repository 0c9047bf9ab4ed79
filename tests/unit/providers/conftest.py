"""Shared fixtures for provider registration tests."""

from __future__ import annotations

from typing import Any, Sequence

import pytest

from secrets_registrar.providers import (
    ConfigurationBuilder,
    InstanceSettings,
    ProviderType,
    RegistrationLedger,
    ServiceCollection,
)


class RecordingTracing:
    """TracingConfigurator that remembers every add_sources call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def add_sources(self, names: Sequence[str]) -> None:
        self.calls.append(tuple(names))


class RecordingProvider:
    """Provider whose hooks record calls and can be told to fail."""

    def __init__(
        self,
        provider_name: str = "Vault",
        provider_type: ProviderType | str = ProviderType.SECRETS,
        activity_source_names: Sequence[str] = ("tests.vault",),
        reject: set[str] | None = None,
        explode_on: set[str] | None = None,
    ) -> None:
        self.provider_name = provider_name
        self.provider_type = provider_type
        self.activity_source_names = activity_source_names
        self.reject = reject or set()
        self.explode_on = explode_on or set()
        self.validated: list[str | None] = []
        self.activated: list[str | None] = []

    def validate_settings(self, settings: InstanceSettings) -> None:
        self.validated.append(settings.identifier)
        if settings.identifier in self.reject:
            raise ValueError(f"identifier {settings.identifier} rejected")

    def add_instance(self, settings: InstanceSettings, services: Any, configuration: Any) -> None:
        if settings.identifier in self.explode_on:
            raise RuntimeError("backing store unreachable")
        self.activated.append(settings.identifier)


@pytest.fixture
def ledger() -> RegistrationLedger:
    return RegistrationLedger()


@pytest.fixture
def services() -> ServiceCollection:
    return ServiceCollection()


@pytest.fixture
def configuration() -> ConfigurationBuilder:
    return ConfigurationBuilder()


@pytest.fixture
def tracing() -> RecordingTracing:
    return RecordingTracing()


@pytest.fixture
def provider_factory() -> type[RecordingProvider]:
    return RecordingProvider
