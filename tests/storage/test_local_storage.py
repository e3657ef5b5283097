"""Unit tests for LocalKittyStore."""

import pytest

from kitties.core.errors import KittyAlreadyExistsError, KittyIdOverflowError
from kitties.core.kitty import Kitty
from kitties.storage.local import LocalKittyStore
from kitties.storage.protocol import KittyStore


def _kitty(fill: int) -> Kitty:
    return Kitty(bytes([fill]) * 16)


@pytest.fixture
def populated() -> LocalKittyStore:
    """Three kitties: ids 0 and 2 for alice, id 1 for bob."""
    storage = LocalKittyStore()
    for owner, fill in (("alice", 0x10), ("bob", 0x20), ("alice", 0x30)):
        kitty_id = storage.reserve_id()
        storage.insert(owner, kitty_id, _kitty(fill))
    return storage


def test_get_returns_stored_kitty(populated: LocalKittyStore) -> None:
    assert populated.get("alice", 0) == _kitty(0x10)
    assert populated.get("bob", 1) == _kitty(0x20)


def test_get_is_scoped_to_owner(populated: LocalKittyStore) -> None:
    """A kitty is only found under the owner that holds it."""
    assert populated.get("alice", 1) is None
    assert populated.get("bob", 0) is None
    assert not populated.contains("alice", 1)
    assert populated.contains("bob", 1)


def test_get_missing_returns_none(populated: LocalKittyStore) -> None:
    assert populated.get("alice", 99) is None


def test_insert_twice_is_an_integrity_fault(populated: LocalKittyStore) -> None:
    """A second write to the same slot raises and keeps the original kitty."""
    with pytest.raises(KittyAlreadyExistsError):
        populated.insert("alice", 0, _kitty(0xFF))

    assert populated.get("alice", 0) == _kitty(0x10)


def test_integrity_fault_is_not_a_user_error() -> None:
    from kitties.core.errors import KittiesError

    assert issubclass(KittyAlreadyExistsError, RuntimeError)
    assert not issubclass(KittyAlreadyExistsError, KittiesError)


def test_kitties_of_lists_owner_kitties_in_id_order(populated: LocalKittyStore) -> None:
    assert list(populated.kitties_of("alice")) == [(0, _kitty(0x10)), (2, _kitty(0x30))]
    assert list(populated.kitties_of("carol")) == []


def test_all_kitties_in_id_order(populated: LocalKittyStore) -> None:
    assert [(owner, kitty_id) for owner, kitty_id, _ in populated.all_kitties()] == [
        ("alice", 0),
        ("bob", 1),
        ("alice", 2),
    ]
    assert len(populated) == 3


def test_ids_unique_across_owners(populated: LocalKittyStore) -> None:
    """CRITICAL: no two entries share a kitty id, even under different owners."""
    ids = [kitty_id for _, kitty_id, _ in populated.all_kitties()]
    assert len(ids) == len(set(ids))
    assert populated.next_kitty_id == len(populated)


def test_id_reservation_is_delegated_to_allocator() -> None:
    storage = LocalKittyStore(id_limit=1)

    with storage.id_reservation() as kitty_id:
        storage.insert("alice", kitty_id, _kitty(1))

    assert storage.next_kitty_id == 1
    assert storage.id_limit == 1
    with pytest.raises(KittyIdOverflowError):
        storage.reserve_id()


def test_snapshot_restore_preserves_state(populated: LocalKittyStore) -> None:
    snapshot = populated.snapshot()

    restored = LocalKittyStore()
    restored.restore(snapshot)

    assert list(restored.all_kitties()) == list(populated.all_kitties())
    assert restored.next_kitty_id == 3
    assert restored.snapshot() == snapshot


def test_restore_keeps_id_limit() -> None:
    storage = LocalKittyStore(id_limit=1)
    storage.reserve_id()

    restored = LocalKittyStore()
    restored.restore(storage.snapshot())

    with pytest.raises(KittyIdOverflowError):
        restored.reserve_id()


def test_local_store_satisfies_protocol() -> None:
    storage: KittyStore = LocalKittyStore()
    assert storage.next_kitty_id == 0
