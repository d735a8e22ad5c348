from __future__ import annotations

from password_processor.infrastructure.memory.credential_store import InMemoryCredentialStore


def test_unknown_identity_returns_empty_string() -> None:
    store = InMemoryCredentialStore()

    assert store.get_password_hash_for_identity("alice") == ""
    assert "alice" not in store


def test_set_upserts_hash_for_identity() -> None:
    store = InMemoryCredentialStore({"alice": "first"})

    store.set_password_hash_for_identity("alice", "second")
    store.set_password_hash_for_identity(("tenant", 7), "third")

    assert store.get_password_hash_for_identity("alice") == "second"
    assert store.get_password_hash_for_identity(("tenant", 7)) == "third"
    assert len(store) == 2
