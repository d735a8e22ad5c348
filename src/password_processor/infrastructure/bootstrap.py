"""Wiring helpers that build a password processor from runtime settings."""

from __future__ import annotations

from password_processor.application.ports.credential_store_port import CredentialStorePort
from password_processor.application.ports.password_hasher_port import LegacyHasher
from password_processor.application.services.password_processor_service import (
    PasswordProcessor,
)
from password_processor.config.settings import Settings, load_settings
from password_processor.infrastructure.logging import configure_logging
from password_processor.infrastructure.security.password_hasher import BcryptPasswordHasher


def build_password_processor(
    *,
    credential_store: CredentialStorePort,
    legacy_hasher: LegacyHasher | None = None,
    settings: Settings | None = None,
) -> PasswordProcessor:
    """Build a bcrypt-backed processor using the configured work factor and log level."""

    resolved_settings = settings if settings is not None else load_settings()
    configure_logging(level=resolved_settings.log_level)
    return PasswordProcessor(
        credential_store=credential_store,
        password_hasher=BcryptPasswordHasher(work_factor=resolved_settings.password_work_factor),
        legacy_hasher=legacy_hasher,
    )
