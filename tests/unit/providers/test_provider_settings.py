"""Unit tests for the provider settings model and identity keys."""

from __future__ import annotations

from secrets_registrar.providers import (
    InstanceSettings,
    ProviderSettings,
    ProviderType,
    provider_namespace,
    registration_key,
)


class TestInstanceSettings:
    def test_defaults(self) -> None:
        settings = InstanceSettings()
        assert settings.endpoint == ""
        assert settings.identifier is None

    def test_parse_endpoint_is_noop_by_default(self) -> None:
        settings = InstanceSettings(endpoint="https://vault.local/a")
        settings.parse_endpoint()
        assert settings.endpoint == "https://vault.local/a"

    def test_repr_never_shows_endpoint(self) -> None:
        settings = InstanceSettings(endpoint="https://user:pw@vault.local", identifier="primary")
        assert "vault.local" not in repr(settings)
        assert "primary" in repr(settings)


class TestProviderSettings:
    def test_defaults(self) -> None:
        settings: ProviderSettings[InstanceSettings] = ProviderSettings()
        assert settings.tracing is True
        assert settings.instances == {}

    def test_instances_are_not_shared_between_objects(self) -> None:
        a: ProviderSettings[InstanceSettings] = ProviderSettings()
        b: ProviderSettings[InstanceSettings] = ProviderSettings()
        a.instances["x"] = InstanceSettings(endpoint="e")
        assert b.instances == {}

    def test_from_mapping(self) -> None:
        settings = ProviderSettings.from_mapping(
            {"tracing": False, "instances": {"primary": {"endpoint": "https://vault.local/a"}}}
        )
        assert settings.tracing is False
        assert settings.instances["primary"].endpoint == "https://vault.local/a"


class TestIdentityKeys:
    def test_registration_key_format(self) -> None:
        assert registration_key(ProviderType.SECRETS, "Vault", "primary") == "Secrets.Vault::primary"

    def test_registration_key_accepts_plain_string_type(self) -> None:
        assert registration_key("Messaging", "Bus", "a") == "Messaging.Bus::a"

    def test_namespace_format(self) -> None:
        assert provider_namespace(ProviderType.SECRETS, "Vault") == "Secrets.Vault"
