"""Providers – settings model, uniqueness ledger, validator and registrar."""
from secrets_registrar.providers.settings import (
    InstanceSettings,
    ProviderSettings,
    ProviderType,
    provider_namespace,
    registration_key,
)
from secrets_registrar.providers.errors import (
    ActivationFailedError,
    AlreadyRegisteredError,
    DuplicateEndpointError,
    MissingEndpointError,
    MissingSettingsError,
    ProviderValidationFailedError,
    RegistrationError,
    UnresolvableEndpointError,
)
from secrets_registrar.providers.ledger import RegistrationLedger, fingerprint_endpoint
from secrets_registrar.providers.validator import InstanceValidator
from secrets_registrar.providers.ports import (
    ConfigurationTarget,
    SecretsProvider,
    SecretsProviderBase,
    ServiceTarget,
    SimpleSecretsProvider,
)
from secrets_registrar.providers.targets import ConfigurationBuilder, ConfigurationSource, ServiceCollection
from secrets_registrar.providers.registrar import (
    RegistrationReport,
    RegistrationState,
    SecretsProviderRegistrar,
)
from secrets_registrar.providers.binding import (
    EnvProviderSettingsLoader,
    bind_instance_settings,
    bind_provider_settings,
)

__all__ = [
    "ActivationFailedError",
    "AlreadyRegisteredError",
    "ConfigurationBuilder",
    "ConfigurationSource",
    "ConfigurationTarget",
    "DuplicateEndpointError",
    "EnvProviderSettingsLoader",
    "InstanceSettings",
    "InstanceValidator",
    "MissingEndpointError",
    "MissingSettingsError",
    "ProviderSettings",
    "ProviderType",
    "ProviderValidationFailedError",
    "RegistrationError",
    "RegistrationLedger",
    "RegistrationReport",
    "RegistrationState",
    "SecretsProvider",
    "SecretsProviderBase",
    "SecretsProviderRegistrar",
    "ServiceCollection",
    "ServiceTarget",
    "SimpleSecretsProvider",
    "UnresolvableEndpointError",
    "bind_instance_settings",
    "bind_provider_settings",
    "fingerprint_endpoint",
    "provider_namespace",
    "registration_key",
]
