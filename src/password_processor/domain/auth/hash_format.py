"""Inspection of self-describing password hash strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

_BCRYPT_HASH_PATTERN = re.compile(r"\A\$(?P<variant>2[aby])\$(?P<cost>\d{2})\$[./A-Za-z0-9]{53}\Z")


class HashAlgorithm(StrEnum):
    """Hash algorithms recognized in stored password hashes."""

    BCRYPT = "bcrypt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HashInfo:
    """Metadata parsed from one stored password hash."""

    algorithm: HashAlgorithm
    work_factor: int | None = None

    @property
    def is_recognized(self) -> bool:
        return self.algorithm is not HashAlgorithm.UNKNOWN


UNKNOWN_HASH = HashInfo(algorithm=HashAlgorithm.UNKNOWN)


def inspect_password_hash(password_hash: str) -> HashInfo:
    """Return algorithm and work factor encoded in one stored hash.

    Values that do not follow the bcrypt modular-crypt layout, including
    hex digests produced by legacy hashers, are reported as unknown.
    """

    if not isinstance(password_hash, str):
        return UNKNOWN_HASH

    match = _BCRYPT_HASH_PATTERN.match(password_hash)
    if match is None:
        return UNKNOWN_HASH

    return HashInfo(algorithm=HashAlgorithm.BCRYPT, work_factor=int(match.group("cost")))
