"""Kubernetes adapter – KubernetesSecretsProvider."""
from __future__ import annotations

import dataclasses
import pathlib

from secrets_registrar.config.secrets import KubernetesSecretStore
from secrets_registrar.config.validation import InvalidSettingValueError
from secrets_registrar.observability.logging import SensitiveFieldsFilter
from secrets_registrar.providers.ports import ConfigurationTarget, SecretsProviderBase, ServiceTarget
from secrets_registrar.providers.settings import InstanceSettings, ProviderType

_FILE_SCHEME = "file://"


@dataclasses.dataclass
class KubernetesInstanceSettings(InstanceSettings):
    """``endpoint`` is the directory the secrets volume is mounted at."""

    def parse_endpoint(self) -> None:
        endpoint = self.endpoint.strip()
        if endpoint.startswith(_FILE_SCHEME):
            endpoint = endpoint[len(_FILE_SCHEME):]
        self.endpoint = endpoint.rstrip("/") or "/"


class KubernetesSecretsProvider(SecretsProviderBase[KubernetesInstanceSettings]):
    provider_type = ProviderType.SECRETS
    provider_name = "Kubernetes"

    def validate_settings(self, settings: KubernetesInstanceSettings) -> None:
        if not pathlib.PurePosixPath(settings.endpoint).is_absolute():
            raise InvalidSettingValueError(
                "endpoint", SensitiveFieldsFilter.REDACTED, "mount root must be an absolute path"
            )

    def add_instance(
        self,
        settings: KubernetesInstanceSettings,
        services: ServiceTarget,
        configuration: ConfigurationTarget,
    ) -> None:
        store = KubernetesSecretStore(mount_root=settings.endpoint)
        name = f"kubernetes:{settings.identifier or settings.endpoint}"
        configuration.add_source(store, name=name)
        services.add(name, store)


__all__ = ["KubernetesInstanceSettings", "KubernetesSecretsProvider"]
