"""In-memory credential store adapter."""

from __future__ import annotations

from collections.abc import Hashable, Mapping

from password_processor.application.ports.credential_store_port import CredentialStorePort


class InMemoryCredentialStore(CredentialStorePort):
    """Credential store backed by a process-local dictionary."""

    def __init__(self, initial: Mapping[Hashable, str] | None = None) -> None:
        self._hashes: dict[Hashable, str] = dict(initial or {})

    def get_password_hash_for_identity(self, identity: Hashable) -> str:
        return self._hashes.get(identity, "")

    def set_password_hash_for_identity(self, identity: Hashable, password_hash: str) -> None:
        self._hashes[identity] = password_hash

    def __contains__(self, identity: object) -> bool:
        return identity in self._hashes

    def __len__(self) -> int:
        return len(self._hashes)
