"""Unit tests for the Vault adapter (mocked hvac client)."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Any, Iterator
from unittest.mock import MagicMock, patch

import pytest

from secrets_registrar.adapters.vault import VaultInstanceSettings, VaultSecretStore, VaultSecretsProvider
from secrets_registrar.config.secrets import SecretRef
from secrets_registrar.config.validation import InvalidSettingValueError
from secrets_registrar.observability.tracing import NoopTracer, Span, SpanKind, Tracer
from secrets_registrar.providers import (
    ConfigurationBuilder,
    DuplicateEndpointError,
    ProviderSettings,
    ProviderValidationFailedError,
    RegistrationLedger,
    SecretsProviderRegistrar,
    ServiceCollection,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_REQUIRE_HVAC = "secrets_registrar.adapters.vault.store._require_hvac"


def _make_mock_hvac(kv_data: dict[str, str] | None = None) -> tuple[MagicMock, MagicMock]:
    """Return (mock_module, mock_client)."""
    kv_data = kv_data if kv_data is not None else {"my-key": "my-value"}
    mock_client = MagicMock()
    mock_client.secrets.kv.v2.read_secret_version.return_value = {"data": {"data": kv_data}}
    mock_hvac = MagicMock()
    mock_hvac.Client.return_value = mock_client
    return mock_hvac, mock_client


def _make_store(kv_data: dict[str, str] | None = None, mount: str = "secret") -> tuple[VaultSecretStore, MagicMock]:
    mock_hvac, mock_client = _make_mock_hvac(kv_data)
    with patch(_REQUIRE_HVAC, return_value=mock_hvac):
        store = VaultSecretStore(url="http://vault:8200", token="tok", mount_point=mount)
    return store, mock_client


# ===========================================================================
# VaultSecretStore
# ===========================================================================


class TestVaultSecretStore:
    def test_raises_import_error_without_lib(self) -> None:
        with patch(_REQUIRE_HVAC, side_effect=ImportError("secrets-registrar[vault]")):
            with pytest.raises(ImportError, match="vault"):
                VaultSecretStore()

    def test_creates_hvac_client(self) -> None:
        mock_hvac, _ = _make_mock_hvac()
        with patch(_REQUIRE_HVAC, return_value=mock_hvac):
            VaultSecretStore(url="http://my-vault:8200", token="s.abc123", namespace="team")
        mock_hvac.Client.assert_called_once_with(url="http://my-vault:8200", token="s.abc123", namespace="team")

    def test_name_includes_mount(self) -> None:
        store, _ = _make_store(mount="kv")
        assert store.name == "vault:kv"
        assert store.mount_point == "kv"

    def test_get_returns_value(self) -> None:
        store, client = _make_store({"password": "s3cr3t"})
        assert asyncio.run(store.get(SecretRef(path="db", key="password"))) == "s3cr3t"
        client.secrets.kv.v2.read_secret_version.assert_called_once_with(path="db", mount_point="secret")

    def test_get_passes_version(self) -> None:
        store, client = _make_store({"password": "old"})
        asyncio.run(store.get(SecretRef(path="db", key="password", version="3")))
        client.secrets.kv.v2.read_secret_version.assert_called_once_with(path="db", mount_point="secret", version=3)

    def test_get_missing_key_raises(self) -> None:
        store, _ = _make_store({"other": "x"})
        with pytest.raises(KeyError):
            asyncio.run(store.get(SecretRef(path="db", key="password")))

    def test_get_all(self) -> None:
        store, _ = _make_store({"a": "1", "b": "2"})
        assert asyncio.run(store.get_all("bundle")) == {"a": "1", "b": "2"}

    def test_reads_run_inside_client_span(self) -> None:
        spans: list[tuple[str, SpanKind, dict[str, Any] | None]] = []

        class _RecordingTracer(Tracer):
            @contextlib.contextmanager
            def start_span(self, name: str, kind: SpanKind = SpanKind.INTERNAL, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
                spans.append((name, kind, attributes))
                with NoopTracer().start_span(name) as span:
                    yield span

        mock_hvac, _ = _make_mock_hvac({"a": "1"})
        with patch(_REQUIRE_HVAC, return_value=mock_hvac):
            store = VaultSecretStore(mount_point="kv", tracer=_RecordingTracer())
        asyncio.run(store.get(SecretRef(path="app", key="a")))
        asyncio.run(store.get_all("app"))
        assert spans == [
            ("vault.read_secret", SpanKind.CLIENT, {"vault.mount_point": "kv", "vault.path": "app"}),
        ] * 2


# ===========================================================================
# VaultInstanceSettings
# ===========================================================================


class TestVaultInstanceSettings:
    def test_parse_adds_scheme_and_strips_slash(self) -> None:
        settings = VaultInstanceSettings(endpoint=" vault.local:8200/ ")
        settings.parse_endpoint()
        assert settings.endpoint == "https://vault.local:8200"

    def test_parse_keeps_explicit_scheme(self) -> None:
        settings = VaultInstanceSettings(endpoint="http://127.0.0.1:8200/")
        settings.parse_endpoint()
        assert settings.endpoint == "http://127.0.0.1:8200"

    def test_repr_hides_token_and_endpoint(self) -> None:
        text = repr(VaultInstanceSettings(endpoint="https://vault.local", token="s.abc"))
        assert "s.abc" not in text
        assert "vault.local" not in text


# ===========================================================================
# VaultSecretsProvider
# ===========================================================================


class TestVaultSecretsProvider:
    def test_contract(self) -> None:
        provider = VaultSecretsProvider()
        assert provider.provider_type == "Secrets"
        assert provider.provider_name == "Vault"
        assert provider.activity_source_names == ("secrets_registrar.vault",)

    def test_rejects_non_http_scheme_without_leaking(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            VaultSecretsProvider().validate_settings(VaultInstanceSettings(endpoint="ftp://vault.local"))
        assert "vault.local" not in exc_info.value.message

    def test_rejects_blank_mount_point(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            VaultSecretsProvider().validate_settings(
                VaultInstanceSettings(endpoint="https://vault.local", mount_point=" ")
            )

    def test_accepts_https(self) -> None:
        VaultSecretsProvider().validate_settings(VaultInstanceSettings(endpoint="https://vault.local"))


class TestVaultRegistration:
    def _register(self, data: dict[str, Any]) -> tuple[Any, ServiceCollection, ConfigurationBuilder, MagicMock]:
        mock_hvac, _ = _make_mock_hvac()
        services, configuration = ServiceCollection(), ConfigurationBuilder()
        registrar = SecretsProviderRegistrar(VaultSecretsProvider(), RegistrationLedger())
        settings = ProviderSettings.from_mapping(data, VaultInstanceSettings)
        with patch(_REQUIRE_HVAC, return_value=mock_hvac):
            result = registrar.register(settings, services, configuration)
        return result, services, configuration, mock_hvac

    def test_adds_store_per_instance(self) -> None:
        result, services, configuration, mock_hvac = self._register({
            "instances": {
                "primary": {"endpoint": "vault.local/a", "identifier": "main", "token": "t1"},
                "secondary": {"endpoint": "https://vault.local/b", "mountPoint": "kv"},
            },
        })
        report = result.unwrap()
        assert report.instance_keys == ("primary", "secondary")
        assert len(configuration) == 2
        assert "vault:main" in services
        assert isinstance(configuration.source("vault:main"), VaultSecretStore)
        assert mock_hvac.Client.call_args_list[0].kwargs == {"url": "https://vault.local/a", "token": "t1"}
        assert configuration.sources[1].store.mount_point == "kv"

    def test_scheme_less_and_explicit_endpoints_deduplicated(self) -> None:
        result, _, configuration, _ = self._register({
            "instances": {
                "primary": {"endpoint": "vault.local/a"},
                "secondary": {"endpoint": "https://vault.local/a/"},
            },
        })
        error = result.unwrap_err()
        assert isinstance(error, DuplicateEndpointError)
        assert error.instance_key == "secondary"
        assert len(configuration) == 1

    def test_invalid_endpoint_fails_provider_validation(self) -> None:
        result, _, configuration, _ = self._register({"instances": {"primary": {"endpoint": "ftp://vault.local"}}})
        error = result.unwrap_err()
        assert isinstance(error, ProviderValidationFailedError)
        assert isinstance(error.cause, InvalidSettingValueError)
        assert len(configuration) == 0
