"""RegistrationContext – the per-bootstrap owner of the ledger and targets.

Create exactly one context while the application starts and register every
provider through it::

    context = RegistrationContext.from_env()
    context.register(VaultSecretsProvider(), vault_settings).unwrap()
    context.register(KubernetesSecretsProvider(), k8s_settings).unwrap()

A configuration reload that needs to re-admit instances builds a new
context, and with it a fresh ledger.
"""
from __future__ import annotations

from typing import Any, Mapping

from secrets_registrar.config.settings import EnvSettingsLoader, RegistrarSettings
from secrets_registrar.kernel.result import Result
from secrets_registrar.observability.logging import JsonLoggerFactory, get_logger
from secrets_registrar.observability.tracing import NoopTracer, Tracer, TracingConfigurator
from secrets_registrar.providers import (
    ConfigurationBuilder,
    ProviderSettings,
    RegistrationError,
    RegistrationLedger,
    RegistrationReport,
    SecretsProvider,
    SecretsProviderRegistrar,
    ServiceCollection,
)

logger = get_logger(__name__)


class RegistrationContext:
    def __init__(
        self,
        settings: RegistrarSettings | None = None,
        *,
        ledger: RegistrationLedger | None = None,
        services: ServiceCollection | None = None,
        configuration: ConfigurationBuilder | None = None,
        tracing: TracingConfigurator | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        self.settings = settings or RegistrarSettings()
        self.ledger = ledger or RegistrationLedger()
        self.services = services or ServiceCollection()
        self.configuration = configuration or ConfigurationBuilder()
        self.tracing = tracing
        self.tracer = tracer or NoopTracer()

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        configure_logging: bool = True,
        **kwargs: Any,
    ) -> RegistrationContext:
        """Load :class:`RegistrarSettings` from ``SECRETS_REGISTRAR_*`` variables."""
        settings = EnvSettingsLoader(environ).load(RegistrarSettings)
        if configure_logging:
            JsonLoggerFactory.configure(level=settings.log_level_number, json=settings.json_logs)
        logger.debug("registration_context.created", log_level=settings.log_level, tracing_enabled=settings.tracing_enabled)
        return cls(settings, **kwargs)

    def registrar_for(self, provider: SecretsProvider[Any]) -> SecretsProviderRegistrar[Any]:
        return SecretsProviderRegistrar(
            provider,
            self.ledger,
            tracing=self.tracing,
            tracer=self.tracer,
            tracing_enabled=self.settings.tracing_enabled,
        )

    def register(
        self,
        provider: SecretsProvider[Any],
        provider_settings: ProviderSettings[Any] | None,
    ) -> Result[RegistrationReport, RegistrationError]:
        return self.registrar_for(provider).register(provider_settings, self.services, self.configuration)


__all__ = ["RegistrationContext"]
