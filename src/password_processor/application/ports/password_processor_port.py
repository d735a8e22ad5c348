"""Port for creating, updating and verifying stored passwords."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol


class PasswordProcessorPort(Protocol):
    """Password processing contract consumed by authentication flows."""

    def create_password(self, password: Any) -> str:
        """Return a new standard hash for a non-empty plaintext password."""

    def update_password(self, identity: Hashable, password: Any) -> None:
        """Hash password and store it for identity."""

    def verify_password(self, identity: Hashable, password: Any) -> bool:
        """Return whether password matches the hash stored for identity."""
