"""HashiCorp Vault adapter – VaultSecretsProvider and its instance settings."""
from __future__ import annotations

import contextlib
import dataclasses
from typing import Any, Callable, Iterator
from urllib.parse import urlsplit

from secrets_registrar.adapters.vault.store import VaultSecretStore
from secrets_registrar.config.validation import InvalidSettingValueError
from secrets_registrar.observability.logging import SensitiveFieldsFilter, get_logger
from secrets_registrar.observability.tracing import Span, SpanKind, Tracer
from secrets_registrar.providers.ledger import fingerprint_endpoint
from secrets_registrar.providers.ports import ConfigurationTarget, SecretsProviderBase, ServiceTarget
from secrets_registrar.providers.settings import InstanceSettings, ProviderType

logger = get_logger(__name__)

VAULT_ACTIVITY_SOURCE = "secrets_registrar.vault"


@dataclasses.dataclass
class VaultInstanceSettings(InstanceSettings):
    """``endpoint`` is the Vault address, e.g. ``https://vault.local:8200``."""

    token: str | None = dataclasses.field(default=None, repr=False)
    mount_point: str = "secret"
    namespace: str | None = None

    def parse_endpoint(self) -> None:
        endpoint = self.endpoint.strip()
        if "://" not in endpoint:
            endpoint = f"https://{endpoint}"
        self.endpoint = endpoint.rstrip("/")


class _SourceTracer(Tracer):
    """Looks up the tracer for *source* on every span.

    Stores are created before the registrar enables the activity source, so
    the lookup cannot happen at activation time.
    """

    def __init__(self, tracers: Callable[[str], Tracer], source: str) -> None:
        self._tracers = tracers
        self._source = source

    @contextlib.contextmanager
    def start_span(self, name: str, kind: SpanKind = SpanKind.INTERNAL, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
        with self._tracers(self._source).start_span(name, kind, attributes) as span:
            yield span


class VaultSecretsProvider(SecretsProviderBase[VaultInstanceSettings]):
    """Adds one :class:`VaultSecretStore` per configured Vault instance.

    Pass *tracers* (typically ``OtelTracingConfigurator.tracer``) to trace
    secret reads under the ``secrets_registrar.vault`` activity source.
    """

    provider_type = ProviderType.SECRETS
    provider_name = "Vault"
    activity_source_names = (VAULT_ACTIVITY_SOURCE,)

    def __init__(self, tracers: Callable[[str], Tracer] | None = None) -> None:
        self._tracers = tracers

    def validate_settings(self, settings: VaultInstanceSettings) -> None:
        parts = urlsplit(settings.endpoint)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise InvalidSettingValueError(
                "endpoint", SensitiveFieldsFilter.REDACTED, "expected an http(s) Vault address"
            )
        if not settings.mount_point.strip():
            raise InvalidSettingValueError("mount_point", settings.mount_point, "must not be blank")

    def add_instance(
        self,
        settings: VaultInstanceSettings,
        services: ServiceTarget,
        configuration: ConfigurationTarget,
    ) -> None:
        kwargs: dict[str, Any] = {}
        if settings.namespace:
            kwargs["namespace"] = settings.namespace
        store = VaultSecretStore(
            url=settings.endpoint,
            token=settings.token,
            mount_point=settings.mount_point,
            tracer=_SourceTracer(self._tracers, VAULT_ACTIVITY_SOURCE) if self._tracers is not None else None,
            **kwargs,
        )
        name = f"vault:{settings.identifier or fingerprint_endpoint(settings.endpoint)[:12]}"
        configuration.add_source(store, name=name)
        services.add(name, store)
        logger.debug("vault.instance_added", service=name, mount_point=settings.mount_point)


__all__ = ["VAULT_ACTIVITY_SOURCE", "VaultInstanceSettings", "VaultSecretsProvider"]
