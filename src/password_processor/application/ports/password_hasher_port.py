"""Port for password hashing and verification."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from password_processor.domain.auth.hash_format import HashInfo

LegacyHasher = Callable[[str], str]


class PasswordHashingError(RuntimeError):
    """Raised when the hashing primitive cannot produce a password hash."""


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""

    def identify(self, password_hash: str) -> HashInfo:
        """Return algorithm metadata encoded in a stored hash."""

    def needs_rehash(self, password_hash: str) -> bool:
        """Return whether a stored hash was created with outdated parameters."""
