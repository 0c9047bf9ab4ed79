"""HashiCorp Vault adapter – VaultSecretStore."""
from __future__ import annotations

import asyncio
from typing import Any

from secrets_registrar.config.secrets import SecretRef, SecretStore
from secrets_registrar.observability.tracing import NoopTracer, SpanKind, Tracer


def _require_hvac() -> Any:
    try:
        import hvac  # type: ignore[import-untyped]
        return hvac
    except ImportError as exc:
        raise ImportError("Install 'secrets-registrar[vault]' (hvac) to use the Vault adapter") from exc


class VaultSecretStore(SecretStore):
    """HashiCorp Vault KV v2 secret backend.

    Every read runs inside a ``vault.read_secret`` client span on *tracer*.
    """

    def __init__(
        self,
        url: str = "http://127.0.0.1:8200",
        token: str | None = None,
        mount_point: str = "secret",
        tracer: Tracer | None = None,
        **kwargs: Any,
    ) -> None:
        hvac = _require_hvac()
        self._client = hvac.Client(url=url, token=token, **kwargs)
        self._mount = mount_point
        self._tracer = tracer or NoopTracer()

    @property
    def name(self) -> str:
        return f"vault:{self._mount}"

    @property
    def mount_point(self) -> str:
        return self._mount

    @property
    def client(self) -> Any:
        return self._client

    def _span_attributes(self, path: str) -> dict[str, Any]:
        return {"vault.mount_point": self._mount, "vault.path": path}

    async def get(self, ref: SecretRef) -> str:
        with self._tracer.start_span("vault.read_secret", SpanKind.CLIENT, self._span_attributes(ref.path)):
            return await asyncio.get_running_loop().run_in_executor(None, self._sync_get, ref)

    def _sync_get(self, ref: SecretRef) -> str:
        kwargs: dict[str, Any] = {"path": ref.path, "mount_point": self._mount}
        if ref.version is not None:
            kwargs["version"] = int(ref.version)
        response = self._client.secrets.kv.v2.read_secret_version(**kwargs)
        data: dict[str, str] = response["data"]["data"]
        if ref.key not in data:
            raise KeyError(f"Key '{ref.key}' not found at path '{ref.path}'")
        return data[ref.key]

    async def get_all(self, path: str) -> dict[str, str]:
        with self._tracer.start_span("vault.read_secret", SpanKind.CLIENT, self._span_attributes(path)):
            return await asyncio.get_running_loop().run_in_executor(None, self._sync_get_all, path)

    def _sync_get_all(self, path: str) -> dict[str, str]:
        response = self._client.secrets.kv.v2.read_secret_version(path=path, mount_point=self._mount)
        return response["data"]["data"]


__all__ = ["VaultSecretStore"]
