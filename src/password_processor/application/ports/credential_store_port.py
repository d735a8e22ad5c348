"""Port for reading and writing stored password hashes."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol


class CredentialStorePort(Protocol):
    """Credential store contract keyed by an opaque identity."""

    def get_password_hash_for_identity(self, identity: Hashable) -> str:
        """Return the stored hash for identity, or an empty string when none exists."""

    def set_password_hash_for_identity(self, identity: Hashable, password_hash: str) -> None:
        """Store password hash for identity, replacing any existing value."""
