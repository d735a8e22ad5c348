"""Bcrypt password hasher adapter."""

from __future__ import annotations

import bcrypt

from password_processor.application.ports.password_hasher_port import (
    PasswordHasherPort,
    PasswordHashingError,
)
from password_processor.domain.auth.hash_format import (
    HashAlgorithm,
    HashInfo,
    inspect_password_hash,
)

DEFAULT_WORK_FACTOR = 11
MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31

# bcrypt ignores input past this many bytes.
BCRYPT_MAX_PASSWORD_BYTES = 72

# Failed crypt() style output is shorter than a salt prefix.
_MIN_HASH_LENGTH = 13


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt at a fixed work factor."""

    def __init__(self, *, work_factor: int = DEFAULT_WORK_FACTOR) -> None:
        if not MIN_WORK_FACTOR <= work_factor <= MAX_WORK_FACTOR:
            raise ValueError(
                f"bcrypt work factor must be between {MIN_WORK_FACTOR} and {MAX_WORK_FACTOR}"
            )
        self._work_factor = work_factor

    @property
    def work_factor(self) -> int:
        return self._work_factor

    def hash_password(self, password: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self._work_factor)
            hashed = bcrypt.hashpw(_encode_password(password), salt)
        except (OSError, ValueError) as exc:
            raise PasswordHashingError("unable to create password hash") from exc

        password_hash = hashed.decode("utf-8") if hashed else ""
        if len(password_hash) < _MIN_HASH_LENGTH or not self.identify(password_hash).is_recognized:
            raise PasswordHashingError("unable to create password hash")
        return password_hash

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode_password(password), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def identify(self, password_hash: str) -> HashInfo:
        return inspect_password_hash(password_hash)

    def needs_rehash(self, password_hash: str) -> bool:
        info = self.identify(password_hash)
        if info.algorithm is not HashAlgorithm.BCRYPT:
            return True
        return info.work_factor != self._work_factor


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
