"""Providers – ProviderSettings, InstanceSettings and derived identity keys."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar


class ProviderType(str, Enum):
    """Kind of provider; participates in registration key namespacing."""

    SECRETS = "Secrets"


def type_tag(provider_type: ProviderType | str) -> str:
    return provider_type.value if isinstance(provider_type, ProviderType) else str(provider_type)


def provider_namespace(provider_type: ProviderType | str, provider_name: str) -> str:
    """``"<ProviderType>.<ProviderName>"`` – the scope for endpoint fingerprints."""
    return f"{type_tag(provider_type)}.{provider_name}"


def registration_key(provider_type: ProviderType | str, provider_name: str, instance_key: str) -> str:
    """``"<ProviderType>.<ProviderName>::<InstanceKey>"``."""
    return f"{provider_namespace(provider_type, provider_name)}::{instance_key}"


@dataclasses.dataclass
class InstanceSettings:
    """One configured connection of a provider.

    Providers subclass this to add their own fields. ``endpoint`` is a URI,
    ARN, connection string or mount path depending on the provider.
    """

    endpoint: str = dataclasses.field(default="", repr=False)
    identifier: str | None = None

    def parse_endpoint(self) -> None:
        """Normalise ``endpoint`` in place. Runs once, before validation.

        No-op by default. Raise to signal that the endpoint cannot be parsed.
        """


I = TypeVar("I", bound=InstanceSettings)


@dataclasses.dataclass
class ProviderSettings(Generic[I]):
    """Provider-level settings: tracing flag plus named instances.

    Zero instances is legal; registration is then a no-op.
    """

    tracing: bool = True
    instances: dict[str, I | None] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any] | None,
        instance_type: type[InstanceSettings] = InstanceSettings,
    ) -> ProviderSettings[Any]:
        from secrets_registrar.providers.binding import bind_provider_settings

        return bind_provider_settings(data, instance_type)


__all__ = [
    "InstanceSettings",
    "ProviderSettings",
    "ProviderType",
    "provider_namespace",
    "registration_key",
    "type_tag",
]
