"""Providers – bind raw configuration into ProviderSettings.

Consumes the conventional shape::

    {"tracing": true, "instances": {"<key>": {"endpoint": "...", "identifier": "..."}}}

from a mapping (JSON/YAML/TOML already parsed by the application) or from
``<SECTION>__...`` environment variables.
"""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping

from secrets_registrar.config.settings.loaders import coerce_value
from secrets_registrar.config.validation import ConfigError, InvalidSettingValueError
from secrets_registrar.observability.logging import get_logger
from secrets_registrar.providers.settings import InstanceSettings, ProviderSettings

logger = get_logger(__name__)

_SEPARATOR = "__"


def _normalise(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def _lookup(data: Mapping[str, Any], name: str) -> tuple[bool, Any]:
    wanted = _normalise(name)
    for key, value in data.items():
        if _normalise(str(key)) == wanted:
            return True, value
    return False, None


def bind_instance_settings(
    instance_key: str,
    data: Mapping[str, Any] | None,
    instance_type: type[InstanceSettings] = InstanceSettings,
) -> InstanceSettings | None:
    """Build *instance_type* from *data*; ``None`` stays ``None``."""
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise InvalidSettingValueError(f"instances.{instance_key}", type(data).__name__, "expected a mapping")

    kwargs: dict[str, Any] = {}
    known: set[str] = set()
    for field in dataclasses.fields(instance_type):
        if not field.init:
            continue
        known.add(_normalise(field.name))
        found, raw = _lookup(data, field.name)
        if found:
            kwargs[field.name] = coerce_value(f"instances.{instance_key}.{field.name}", raw, field.type)

    unknown = sorted(str(k) for k in data if _normalise(str(k)) not in known)
    if unknown:
        logger.debug("binding.unknown_keys_ignored", instance_key=instance_key, keys=unknown)

    try:
        return instance_type(**kwargs)
    except ConfigError:
        raise
    except Exception as exc:
        raise ConfigError(
            f"Failed to bind settings for instance '{instance_key}': {type(exc).__name__}",
            detail={"instance_key": instance_key},
            cause=exc,
        ) from exc


def bind_provider_settings(
    data: Mapping[str, Any] | None,
    instance_type: type[InstanceSettings] = InstanceSettings,
) -> ProviderSettings[Any]:
    """Bind a provider section. A missing section yields empty settings."""
    if data is None:
        return ProviderSettings()
    if not isinstance(data, Mapping):
        raise InvalidSettingValueError("provider", type(data).__name__, "expected a mapping")

    found, raw_tracing = _lookup(data, "tracing")
    tracing = coerce_value("tracing", raw_tracing, bool) if found and raw_tracing is not None else True

    _, raw_instances = _lookup(data, "instances")
    if raw_instances is None:
        raw_instances = {}
    if not isinstance(raw_instances, Mapping):
        raise InvalidSettingValueError("instances", type(raw_instances).__name__, "expected a mapping")

    instances = {
        str(key): bind_instance_settings(str(key), value, instance_type)
        for key, value in raw_instances.items()
    }
    return ProviderSettings(tracing=bool(tracing), instances=instances)


class EnvProviderSettingsLoader:
    """Read ``<SECTION>__TRACING`` and ``<SECTION>__INSTANCES__<KEY>__<FIELD>``.

    Instance keys are lower-cased; field names match case-insensitively.
    """

    def __init__(
        self,
        section: str,
        instance_type: type[InstanceSettings] = InstanceSettings,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._section = section.upper()
        self._instance_type = instance_type
        self._environ = environ

    def load(self) -> ProviderSettings[Any]:
        environ = os.environ if self._environ is None else self._environ
        prefix = f"{self._section}{_SEPARATOR}"
        tree: dict[str, Any] = {}
        instances: dict[str, dict[str, str]] = {}

        for name, value in environ.items():
            upper = name.upper()
            if not upper.startswith(prefix):
                continue
            parts = name[len(prefix):].split(_SEPARATOR)
            if len(parts) == 1 and parts[0].upper() == "TRACING":
                tree["tracing"] = value
            elif len(parts) == 3 and parts[0].upper() == "INSTANCES":
                instances.setdefault(parts[1].lower(), {})[parts[2]] = value

        if instances:
            tree["instances"] = instances
        return bind_provider_settings(tree, self._instance_type)


__all__ = ["EnvProviderSettingsLoader", "bind_instance_settings", "bind_provider_settings"]
