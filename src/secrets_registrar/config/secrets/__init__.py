"""Config secrets – secret reference, store port and the Kubernetes file store."""
from secrets_registrar.config.secrets.port import SecretRef, SecretStore
from secrets_registrar.config.secrets.kubernetes import KubernetesSecretStore

__all__ = ["KubernetesSecretStore", "SecretRef", "SecretStore"]
