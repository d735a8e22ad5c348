"""Validation helpers for plaintext password inputs."""

from __future__ import annotations

from typing import Any


class InvalidPasswordInputError(ValueError):
    """Raised when a plaintext password is empty or not a string."""


def validate_plaintext_password(*, password: Any) -> str:
    """Return the password unchanged or reject values that cannot be hashed."""

    if not isinstance(password, str) or not password:
        raise InvalidPasswordInputError("input password must be a non-empty string")
    return password
