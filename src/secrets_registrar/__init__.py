"""
secrets_registrar – admit secrets provider instances into an application, once, safely.

Import path convention::

    from secrets_registrar.providers import RegistrationLedger, SecretsProviderRegistrar
    from secrets_registrar.providers import InstanceSettings, ProviderSettings
    from secrets_registrar.kernel.result import Err, Ok
    from secrets_registrar.adapters.vault import VaultSecretsProvider
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
