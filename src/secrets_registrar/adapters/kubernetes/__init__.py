"""Kubernetes adapter – mounted-secret files as a secrets provider."""
from secrets_registrar.adapters.kubernetes.provider import KubernetesInstanceSettings, KubernetesSecretsProvider

__all__ = ["KubernetesInstanceSettings", "KubernetesSecretsProvider"]
