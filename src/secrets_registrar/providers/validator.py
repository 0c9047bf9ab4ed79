"""Providers – InstanceValidator.

Runs the provider-agnostic structural checks in a fixed order, then hands
a structurally sound, already-deduplicated instance to the provider's own
validation hook.
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from secrets_registrar.kernel.result import Err, Ok, Result
from secrets_registrar.observability.logging import get_logger
from secrets_registrar.providers.errors import (
    MissingEndpointError,
    MissingSettingsError,
    ProviderValidationFailedError,
    RegistrationError,
    UnresolvableEndpointError,
)
from secrets_registrar.providers.ledger import RegistrationLedger
from secrets_registrar.providers.settings import InstanceSettings, ProviderType, provider_namespace

logger = get_logger(__name__)

I = TypeVar("I", bound=InstanceSettings)

ProviderValidate = Callable[[Any], "Result[Any, RegistrationError] | None"]


class InstanceValidator:
    """Validate one instance against a shared :class:`RegistrationLedger`."""

    def __init__(self, ledger: RegistrationLedger) -> None:
        self._ledger = ledger

    @property
    def ledger(self) -> RegistrationLedger:
        return self._ledger

    def validate(
        self,
        instance_key: str,
        settings: I | None,
        provider_type: ProviderType | str,
        provider_name: str,
        provider_validate: ProviderValidate | None = None,
    ) -> Result[I, RegistrationError]:
        """Check *settings* and claim its endpoint.

        Steps, each short-circuiting the rest on failure:

        1. settings present
        2. endpoint not blank
        3. ``settings.parse_endpoint()``
        4. endpoint fingerprint resolvable
        5. endpoint fingerprint not yet claimed in the provider namespace
        6. *provider_validate*; an ``Err`` or a :class:`RegistrationError`
           it raises is returned unchanged, any other exception becomes
           :class:`ProviderValidationFailedError`.
        """
        scope = {"provider_type": provider_type, "provider_name": provider_name}

        if settings is None:
            return Err(MissingSettingsError(instance_key, **scope))

        endpoint = settings.endpoint
        if endpoint is None or (isinstance(endpoint, str) and not endpoint.strip()):
            return Err(MissingEndpointError(instance_key, **scope))
        if not isinstance(endpoint, str):
            return Err(UnresolvableEndpointError(instance_key, "endpoint is not a string", **scope))

        try:
            settings.parse_endpoint()
        except Exception as exc:
            return Err(UnresolvableEndpointError(instance_key, f"endpoint could not be parsed ({type(exc).__name__})", cause=exc, **scope))

        if not isinstance(settings.endpoint, str) or not settings.endpoint.strip():
            return Err(UnresolvableEndpointError(instance_key, "endpoint is empty after parsing", **scope))

        try:
            fingerprint = self._ledger.fingerprint(settings.endpoint)
        except Exception as exc:
            return Err(UnresolvableEndpointError(instance_key, cause=exc, **scope))
        if not isinstance(fingerprint, str) or not fingerprint.strip():
            return Err(UnresolvableEndpointError(instance_key, **scope))

        claimed = self._ledger.claim_endpoint(provider_namespace(provider_type, provider_name), fingerprint, instance_key)
        if claimed.is_err():
            return Err(claimed.unwrap_err())

        if provider_validate is not None:
            failure = self._run_provider_validate(provider_validate, instance_key, settings, scope)
            if failure is not None:
                return Err(failure)

        logger.debug("validator.instance_valid", instance_key=instance_key, **scope)
        return Ok(settings)

    @staticmethod
    def _run_provider_validate(
        provider_validate: ProviderValidate,
        instance_key: str,
        settings: InstanceSettings,
        scope: dict[str, Any],
    ) -> RegistrationError | None:
        try:
            outcome = provider_validate(settings)
        except RegistrationError as exc:
            return exc
        except Exception as exc:
            return ProviderValidationFailedError(
                getattr(exc, "message", None) or str(exc) or type(exc).__name__,
                instance_key=instance_key,
                cause=exc,
                **scope,
            )
        if isinstance(outcome, Err):
            return outcome.unwrap_err()
        return None


__all__ = ["InstanceValidator", "ProviderValidate"]
