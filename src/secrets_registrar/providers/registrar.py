"""Providers – SecretsProviderRegistrar.

Per ``register`` call::

    Idle → Iterating → (Claiming → Validating → Activating)* → TracingConfigured → Done
                 └──────────────── any failure ──────────────→ Failed

Fail-fast with no rollback: instances activated before a failure stay
activated and their ledger claims stay in place.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

from secrets_registrar.kernel.result import Err, Ok, Result
from secrets_registrar.observability.logging import get_logger
from secrets_registrar.observability.tracing import (
    NoopTracer,
    NoopTracingConfigurator,
    SpanKind,
    Tracer,
    TracingConfigurator,
)
from secrets_registrar.providers.errors import ActivationFailedError, RegistrationError
from secrets_registrar.providers.ledger import RegistrationLedger
from secrets_registrar.providers.ports import ConfigurationTarget, SecretsProvider, ServiceTarget
from secrets_registrar.providers.settings import (
    InstanceSettings,
    ProviderSettings,
    registration_key,
    type_tag,
)
from secrets_registrar.providers.validator import InstanceValidator

logger = get_logger(__name__)

I = TypeVar("I", bound=InstanceSettings)


class RegistrationState(str, Enum):
    IDLE = "idle"
    ITERATING = "iterating"
    CLAIMING = "claiming"
    VALIDATING = "validating"
    ACTIVATING = "activating"
    TRACING_CONFIGURED = "tracing_configured"
    DONE = "done"
    FAILED = "failed"


@dataclasses.dataclass(frozen=True)
class RegistrationReport:
    """Outcome of a successful ``register`` call."""

    provider_type: str
    provider_name: str
    instance_keys: tuple[str, ...] = ()
    traced_sources: tuple[str, ...] = ()

    @property
    def is_noop(self) -> bool:
        return not self.instance_keys


class SecretsProviderRegistrar(Generic[I]):
    """Admit the instances of one provider into the application.

    Parameters
    ----------
    provider:
        Any value satisfying :class:`~secrets_registrar.providers.ports.SecretsProvider`.
    ledger:
        The bootstrap-wide :class:`RegistrationLedger`, shared by every registrar.
    tracing:
        Telemetry collaborator asked to subscribe the provider's activity
        sources once all instances are registered.
    tracer:
        Tracer used to wrap registration steps in spans.
    validator:
        Defaults to an :class:`InstanceValidator` over *ledger*.
    tracing_enabled:
        Process-wide switch, ANDed with ``ProviderSettings.tracing``.
    """

    def __init__(
        self,
        provider: SecretsProvider[I],
        ledger: RegistrationLedger,
        *,
        tracing: TracingConfigurator | None = None,
        tracer: Tracer | None = None,
        validator: InstanceValidator | None = None,
        tracing_enabled: bool = True,
    ) -> None:
        self._provider = provider
        self._ledger = ledger
        self._tracing = tracing or NoopTracingConfigurator()
        self._tracer = tracer or NoopTracer()
        self._validator = validator or InstanceValidator(ledger)
        self._tracing_enabled = tracing_enabled
        self._state = RegistrationState.IDLE
        self._log = logger.bind(
            provider_type=type_tag(provider.provider_type),
            provider_name=provider.provider_name,
        )

    @property
    def provider(self) -> SecretsProvider[I]:
        return self._provider

    @property
    def ledger(self) -> RegistrationLedger:
        return self._ledger

    @property
    def state(self) -> RegistrationState:
        """State reached by the most recent ``register`` / ``register_instance`` call."""
        return self._state

    def register(
        self,
        provider_settings: ProviderSettings[I] | None,
        services: ServiceTarget,
        configuration: ConfigurationTarget,
    ) -> Result[RegistrationReport, RegistrationError]:
        """Register every declared instance, then enable tracing.

        Returns the first error encountered; nothing is rolled back.
        """
        provider_type = type_tag(self._provider.provider_type)
        provider_name = self._provider.provider_name

        if provider_settings is None or not provider_settings.instances:
            self._state = RegistrationState.DONE
            self._log.debug("secrets_provider.no_instances")
            return Ok(RegistrationReport(provider_type, provider_name))

        attributes = {
            "secrets_provider.type": provider_type,
            "secrets_provider.name": provider_name,
            "secrets_provider.instance_count": len(provider_settings.instances),
        }
        with self._tracer.start_span("secrets_provider.register", SpanKind.INTERNAL, attributes) as span:
            self._state = RegistrationState.ITERATING
            registered: list[str] = []
            for key, settings in provider_settings.instances.items():
                outcome = self.register_instance(key, settings, services, configuration)
                if outcome.is_err():
                    error = outcome.unwrap_err()
                    span.set_attribute("secrets_provider.failed_instance", key)
                    span.set_status_error(error.code)
                    self._log.error(
                        "secrets_provider.registration_failed",
                        instance_key=key,
                        code=error.code,
                        registered=registered,
                    )
                    return Err(error)
                registered.append(key)

            traced = self._configure_tracing(provider_settings)
            span.set_status_ok()

        self._state = RegistrationState.DONE
        self._log.info("secrets_provider.registered", instances=registered, traced_sources=list(traced))
        return Ok(RegistrationReport(provider_type, provider_name, tuple(registered), traced))

    def register_instance(
        self,
        key: str,
        settings: I | None,
        services: ServiceTarget,
        configuration: ConfigurationTarget,
    ) -> Result[I, RegistrationError]:
        """Claim, validate and activate a single instance.

        Usable on its own, outside of :meth:`register`.
        """
        provider = self._provider
        reg_key = registration_key(provider.provider_type, provider.provider_name, key)

        with self._tracer.start_span(
            "secrets_provider.register_instance",
            SpanKind.INTERNAL,
            {"secrets_provider.registration_key": reg_key},
        ) as span:
            self._state = RegistrationState.CLAIMING
            claimed = self._ledger.claim_registration(reg_key, settings.endpoint if settings is not None else None)
            if claimed.is_err():
                return self._fail(span, claimed.unwrap_err())

            self._state = RegistrationState.VALIDATING
            validated = self._validator.validate(
                key,
                settings,
                provider.provider_type,
                provider.provider_name,
                provider.validate_settings,
            )
            if validated.is_err():
                return self._fail(span, validated.unwrap_err())
            instance = validated.unwrap()

            self._state = RegistrationState.ACTIVATING
            try:
                provider.add_instance(instance, services, configuration)
            except Exception as exc:
                return self._fail(
                    span,
                    ActivationFailedError(
                        f"Activation of service instance '{key}' failed: {type(exc).__name__}",
                        instance_key=key,
                        provider_type=provider.provider_type,
                        provider_name=provider.provider_name,
                        cause=exc,
                    ),
                )

            span.set_status_ok()
        self._log.info("secrets_provider.instance_registered", instance_key=key, registration_key=reg_key)
        return Ok(instance)

    def _fail(self, span: Any, error: RegistrationError) -> Err[RegistrationError]:
        self._state = RegistrationState.FAILED
        span.record_exception(error)
        span.set_status_error(error.code)
        self._log.warning("secrets_provider.instance_rejected", instance_key=error.instance_key, code=error.code)
        return Err(error)

    def _configure_tracing(self, provider_settings: ProviderSettings[I]) -> tuple[str, ...]:
        names: Sequence[str] = self._provider.activity_source_names or ()
        if not (provider_settings.tracing and self._tracing_enabled and names):
            return ()
        sources = tuple(names)
        self._tracing.add_sources(sources)
        self._state = RegistrationState.TRACING_CONFIGURED
        self._log.debug("secrets_provider.tracing_enabled", sources=list(sources))
        return sources


__all__ = ["RegistrationReport", "RegistrationState", "SecretsProviderRegistrar"]
