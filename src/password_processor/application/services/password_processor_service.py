"""Password processor service for hashing, storing and verifying credentials."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Hashable
from typing import Any

from password_processor.application.ports.credential_store_port import CredentialStorePort
from password_processor.application.ports.password_hasher_port import (
    LegacyHasher,
    PasswordHasherPort,
)
from password_processor.application.ports.password_processor_port import PasswordProcessorPort
from password_processor.domain.auth.credentials import validate_plaintext_password

logger = logging.getLogger(__name__)


class UnknownHashFormatError(RuntimeError):
    """Raised when a stored hash is unrecognized and no legacy hasher is configured."""


class PasswordProcessor(PasswordProcessorPort):
    """Create, update and verify password hashes with transparent upgrades.

    Successful verification against a hash created with outdated parameters
    rehashes it in place. When a legacy hasher is configured, stored values
    that are not recognized as standard hashes are compared against its
    output and migrated to the standard format on first match.
    """

    def __init__(
        self,
        *,
        credential_store: CredentialStorePort,
        password_hasher: PasswordHasherPort,
        legacy_hasher: LegacyHasher | None = None,
    ) -> None:
        if legacy_hasher is not None and not callable(legacy_hasher):
            raise TypeError("legacy hasher must be callable")
        self._credential_store = credential_store
        self._password_hasher = password_hasher
        self._legacy_hasher = legacy_hasher

    def create_password(self, password: Any) -> str:
        """Return a freshly salted standard hash for a non-empty password."""

        validated = validate_plaintext_password(password=password)
        return self._password_hasher.hash_password(validated)

    def update_password(self, identity: Hashable, password: Any) -> None:
        """Hash password and store it for identity without reading first."""

        password_hash = self.create_password(password)
        self._credential_store.set_password_hash_for_identity(identity, password_hash)

    def verify_password(self, identity: Hashable, password: Any) -> bool:
        """Verify password for identity, upgrading the stored hash when needed.

        Returns False for unknown identities and mismatched passwords alike.
        Raises UnknownHashFormatError when the stored hash cannot be
        interpreted and there is no legacy hasher to fall back on.
        """

        existing_hash = self._credential_store.get_password_hash_for_identity(identity)
        if not existing_hash:
            return False

        hash_info = self._password_hasher.identify(existing_hash)
        if not hash_info.is_recognized:
            if self._legacy_hasher is None:
                logger.debug("unknown_password_hash_format legacy_hasher=none")
                raise UnknownHashFormatError(
                    "unknown hashing algorithm encountered without a legacy hasher fallback"
                )
            return self._verify_legacy_hash(identity, password, existing_hash)

        if not _is_candidate_password(password):
            return False

        if not self._password_hasher.verify_password(
            password=password,
            password_hash=existing_hash,
        ):
            return False

        if self._password_hasher.needs_rehash(existing_hash):
            self.update_password(identity, password)
            logger.debug(
                "password_hash_rehashed previous_work_factor=%s",
                hash_info.work_factor,
            )
        return True

    def _verify_legacy_hash(self, identity: Hashable, password: Any, existing_hash: str) -> bool:
        assert self._legacy_hasher is not None

        if not _is_candidate_password(password):
            return False

        legacy_digest = self._legacy_hasher(password)
        if not isinstance(legacy_digest, str):
            return False

        if not hmac.compare_digest(existing_hash.encode("utf-8"), legacy_digest.encode("utf-8")):
            return False

        self.update_password(identity, password)
        logger.debug("legacy_password_hash_migrated")
        return True


def _is_candidate_password(password: Any) -> bool:
    return isinstance(password, str) and bool(password)
