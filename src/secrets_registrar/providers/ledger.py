"""Providers – RegistrationLedger and endpoint fingerprinting.

The ledger records which registration keys and which endpoint fingerprints
have been claimed. Create one per application bootstrap and hand the same
instance to every registrar; claims are never released.
"""
from __future__ import annotations

import hashlib
import threading
from typing import Callable, Mapping

from secrets_registrar.kernel.result import Err, Ok, Result
from secrets_registrar.observability.logging import get_logger
from secrets_registrar.providers.errors import AlreadyRegisteredError, DuplicateEndpointError

logger = get_logger(__name__)

Fingerprint = Callable[[str], str]


def fingerprint_endpoint(endpoint: str) -> str:
    """SHA-256 of the UTF-8 endpoint, as 64 lowercase hex characters."""
    return hashlib.sha256(endpoint.encode("utf-8")).hexdigest()


def endpoint_claim_key(namespace: str, fingerprint: str) -> str:
    return f"{namespace}.Connections:{fingerprint}"


def _split_namespace(namespace: str) -> dict[str, str]:
    provider_type, _, provider_name = namespace.partition(".")
    if not provider_name:
        return {}
    return {"provider_type": provider_type, "provider_name": provider_name}


class RegistrationLedger:
    """Thread-safe record of claimed registration keys and endpoints.

    Each ``claim_*`` call is a single check-and-insert under one lock, so
    two concurrent claims of the same token can never both succeed.
    """

    def __init__(self, fingerprint: Fingerprint = fingerprint_endpoint) -> None:
        self._fingerprint = fingerprint
        self._registrations: dict[str, str | None] = {}
        self._endpoints: dict[str, str] = {}
        self._lock = threading.Lock()

    def fingerprint(self, endpoint: str) -> str:
        return self._fingerprint(endpoint)

    def claim_registration(self, key: str, endpoint: str | None) -> Result[None, AlreadyRegisteredError]:
        """Claim *key*; fails for every call after the first, whatever the endpoint."""
        with self._lock:
            if key in self._registrations:
                claimed = False
            else:
                self._registrations[key] = endpoint
                claimed = True
        if not claimed:
            namespace, _, instance_key = key.partition("::")
            logger.warning("ledger.registration_rejected", registration_key=key)
            return Err(AlreadyRegisteredError(instance_key, key, **_split_namespace(namespace)))
        logger.debug("ledger.registration_claimed", registration_key=key)
        return Ok(None)

    def claim_endpoint(
        self,
        namespace: str,
        fingerprint: str,
        instance_key: str,
    ) -> Result[None, DuplicateEndpointError]:
        """Claim *fingerprint* for *instance_key* within *namespace*."""
        claim_key = endpoint_claim_key(namespace, fingerprint)
        with self._lock:
            existing = self._endpoints.get(claim_key)
            if existing is None:
                self._endpoints[claim_key] = instance_key
        if existing is not None:
            logger.warning(
                "ledger.endpoint_rejected",
                namespace=namespace,
                instance_key=instance_key,
                existing_instance_key=existing,
                fingerprint=fingerprint[:12],
            )
            return Err(DuplicateEndpointError(instance_key, existing, **_split_namespace(namespace)))
        logger.debug("ledger.endpoint_claimed", namespace=namespace, instance_key=instance_key, fingerprint=fingerprint[:12])
        return Ok(None)

    def is_registered(self, key: str) -> bool:
        with self._lock:
            return key in self._registrations

    def registration_keys(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._registrations)

    def endpoint_claims(self) -> Mapping[str, str]:
        """Snapshot of ``"<namespace>.Connections:<fingerprint>" -> instance key``."""
        with self._lock:
            return dict(self._endpoints)

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)

    def __repr__(self) -> str:
        return f"RegistrationLedger(registrations={len(self)}, endpoints={len(self.endpoint_claims())})"


__all__ = ["Fingerprint", "RegistrationLedger", "endpoint_claim_key", "fingerprint_endpoint"]
