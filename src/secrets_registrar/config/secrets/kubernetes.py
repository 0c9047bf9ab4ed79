"""Config secrets – KubernetesSecretStore."""
from __future__ import annotations

import pathlib

from secrets_registrar.config.secrets.port import SecretRef, SecretStore


class KubernetesSecretStore(SecretStore):
    """Reads secrets from files mounted by Kubernetes under *mount_root*."""

    def __init__(self, mount_root: str = "/var/run/secrets") -> None:
        self._root = pathlib.Path(mount_root)

    @property
    def mount_root(self) -> pathlib.Path:
        return self._root

    async def get(self, ref: SecretRef) -> str:
        secret_path = self._root / ref.path / ref.key
        if not secret_path.is_file():
            raise FileNotFoundError(f"Secret not found: {ref}")
        return secret_path.read_text().strip()

    async def get_all(self, path: str) -> dict[str, str]:
        base = self._root / path
        return {f.name: f.read_text().strip() for f in sorted(base.iterdir()) if f.is_file()}


__all__ = ["KubernetesSecretStore"]
