"""HashiCorp Vault adapter – secret store and secrets provider."""
from secrets_registrar.adapters.vault.store import VaultSecretStore
from secrets_registrar.adapters.vault.provider import VAULT_ACTIVITY_SOURCE, VaultInstanceSettings, VaultSecretsProvider

__all__ = ["VAULT_ACTIVITY_SOURCE", "VaultInstanceSettings", "VaultSecretStore", "VaultSecretsProvider"]
