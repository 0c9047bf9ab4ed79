"""Providers – registration errors.

Every error names the offending instance key and, where known, the
provider type and name. None of them ever carries the raw endpoint.
"""
from __future__ import annotations

from typing import Any

from secrets_registrar.config.validation.errors import ConfigError
from secrets_registrar.providers.settings import ProviderType, type_tag


class RegistrationError(ConfigError):
    """Base for failures that abort a provider registration."""

    default_code = "registration_error"

    def __init__(
        self,
        message: str,
        *,
        instance_key: str,
        provider_type: ProviderType | str | None = None,
        provider_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = {"instance_key": instance_key}
        if provider_type is not None:
            detail["provider_type"] = type_tag(provider_type)
        if provider_name is not None:
            detail["provider_name"] = provider_name
        detail.update(kwargs.pop("detail", None) or {})
        super().__init__(message, detail=detail, **kwargs)
        self.instance_key = instance_key
        self.provider_type = type_tag(provider_type) if provider_type is not None else None
        self.provider_name = provider_name


class AlreadyRegisteredError(RegistrationError):
    """The registration key was already claimed in this ledger."""

    default_code = "already_registered"

    def __init__(self, instance_key: str, registration_key: str, **kwargs: Any) -> None:
        super().__init__(
            f"A service with the key of '{instance_key}' has already been registered.",
            instance_key=instance_key,
            detail={"registration_key": registration_key},
            **kwargs,
        )
        self.registration_key = registration_key


class MissingSettingsError(RegistrationError):
    default_code = "missing_settings"

    def __init__(self, instance_key: str, **kwargs: Any) -> None:
        super().__init__(
            f"Missing required settings for the service '{instance_key}'.",
            instance_key=instance_key,
            **kwargs,
        )


class MissingEndpointError(RegistrationError):
    default_code = "missing_endpoint"

    def __init__(self, instance_key: str, **kwargs: Any) -> None:
        super().__init__(
            f"The 'endpoint' is missing for service instance '{instance_key}'.",
            instance_key=instance_key,
            **kwargs,
        )


class UnresolvableEndpointError(RegistrationError):
    """The endpoint could not be parsed or fingerprinted."""

    default_code = "unresolvable_endpoint"

    def __init__(self, instance_key: str, reason: str = "unable to resolve an 'endpoint'", **kwargs: Any) -> None:
        super().__init__(
            f"Service instance '{instance_key}' could not be configured: {reason}.",
            instance_key=instance_key,
            **kwargs,
        )
        self.reason = reason


class DuplicateEndpointError(RegistrationError):
    """Another instance in the same provider namespace claimed this endpoint."""

    default_code = "duplicate_endpoint"

    def __init__(self, instance_key: str, existing_instance_key: str, **kwargs: Any) -> None:
        super().__init__(
            f"An endpoint for service instance '{instance_key}' has already been configured "
            f"by instance '{existing_instance_key}'. "
            "Cannot register the same endpoint with multiple instances.",
            instance_key=instance_key,
            detail={"existing_instance_key": existing_instance_key},
            **kwargs,
        )
        self.existing_instance_key = existing_instance_key


class ProviderValidationFailedError(RegistrationError):
    """The provider-specific validation hook rejected the settings."""

    default_code = "provider_validation_failed"


class ActivationFailedError(RegistrationError):
    """The provider's activation hook raised."""

    default_code = "activation_failed"


__all__ = [
    "ActivationFailedError",
    "AlreadyRegisteredError",
    "DuplicateEndpointError",
    "MissingEndpointError",
    "MissingSettingsError",
    "ProviderValidationFailedError",
    "RegistrationError",
    "UnresolvableEndpointError",
]
