"""Storage protocol for swappable kitty registries.

The storage layer abstracts where kitties live, enabling:
- Local in-memory (default)
- Persistent or host-managed state (supplied by the embedding runtime)

Usage:
    storage = LocalKittyStore()
    module = KittiesModule(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager
from typing import Protocol

from kitties.core.kitty import Kitty
from kitties.core.types import KittyId, OwnerId


class KittyStore(Protocol):
    """Abstract registry interface keyed by (owner, kitty_id).

    Kitty ids come from the store's own allocator, so they are unique across
    all owners. Entries are written once and never updated or removed.
    """

    @property
    def next_kitty_id(self) -> KittyId:
        """Id the next successful creation will receive."""
        ...

    def reserve_id(self) -> KittyId:
        """Reserve and consume the next kitty id."""
        ...

    def id_reservation(self) -> AbstractContextManager[KittyId]:
        """Reserve the next kitty id, consuming it only if the block succeeds."""
        ...

    def get(self, owner: OwnerId, kitty_id: KittyId) -> Kitty | None:
        """Get kitty stored under (owner, kitty_id), or None."""
        ...

    def contains(self, owner: OwnerId, kitty_id: KittyId) -> bool:
        """Check whether (owner, kitty_id) holds a kitty."""
        ...

    def insert(self, owner: OwnerId, kitty_id: KittyId, kitty: Kitty) -> None:
        """Store a new kitty. Raises KittyAlreadyExistsError if the slot is taken."""
        ...

    def kitties_of(self, owner: OwnerId) -> Iterator[tuple[KittyId, Kitty]]:
        """Iterate an owner's kitties in id order."""
        ...

    def all_kitties(self) -> Iterator[tuple[OwnerId, KittyId, Kitty]]:
        """Iterate every stored kitty in id order."""
        ...

    def __len__(self) -> int:
        """Number of stored kitties."""
        ...

    def snapshot(self) -> bytes:
        """Serialize entire storage state."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
