"""Local in-memory kitty storage.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    storage = LocalKittyStore()
    module = KittiesModule(storage=storage)
"""

from __future__ import annotations

import logging
import pickle  # nosec B403 - Used only for local testing/prototyping, not production
from collections.abc import Iterator
from contextlib import AbstractContextManager

from kitties.core.errors import KittyAlreadyExistsError
from kitties.core.kitty import Kitty
from kitties.core.types import U32_MAX, KittyId, OwnerId
from kitties.storage.allocator import KittyIdAllocator

logger = logging.getLogger(__name__)


class LocalKittyStore:
    """In-memory registry keyed by the composite (owner, kitty_id) tuple.

    Structure:
        _kitties[(owner, kitty_id)] = kitty

    Global id uniqueness comes from the owned allocator, not from the key
    shape: two owners never receive the same kitty id.

    Args:
        id_limit: Highest value the id counter may reach (default u32 max).
    """

    def __init__(self, id_limit: int = U32_MAX):
        self._allocator = KittyIdAllocator(id_limit=id_limit)
        self._kitties: dict[tuple[OwnerId, KittyId], Kitty] = {}

    @property
    def next_kitty_id(self) -> KittyId:
        return self._allocator.next_kitty_id

    @property
    def id_limit(self) -> int:
        return self._allocator.id_limit

    def reserve_id(self) -> KittyId:
        """Reserve and consume the next kitty id.

        Raises:
            KittyIdOverflowError: If the id space is exhausted.
        """
        return self._allocator.reserve()

    def id_reservation(self) -> AbstractContextManager[KittyId]:
        """Reserve the next kitty id, consuming it only if the block succeeds.

        Raises:
            KittyIdOverflowError: On entry, if the id space is exhausted.
        """
        return self._allocator.reservation()

    def get(self, owner: OwnerId, kitty_id: KittyId) -> Kitty | None:
        """Get the kitty stored under (owner, kitty_id).

        Args:
            owner: Owner the kitty must belong to.
            kitty_id: Kitty id to look up.

        Returns:
            The kitty, or None if the owner holds no kitty with that id.
        """
        return self._kitties.get((owner, kitty_id))

    def contains(self, owner: OwnerId, kitty_id: KittyId) -> bool:
        return (owner, kitty_id) in self._kitties

    def insert(self, owner: OwnerId, kitty_id: KittyId, kitty: Kitty) -> None:
        """Store a new kitty.

        Args:
            owner: Owner of the kitty.
            kitty_id: Id reserved from this store's allocator.
            kitty: Kitty to store.

        Raises:
            KittyAlreadyExistsError: If (owner, kitty_id) was already written.
                Given monotonic ids this indicates corrupted state.
        """
        key = (owner, kitty_id)
        if key in self._kitties:
            raise KittyAlreadyExistsError(f"Kitty {kitty_id} already stored for owner {owner!r}")
        self._kitties[key] = kitty
        logger.debug("Stored kitty %d for owner %r", kitty_id, owner)

    def kitties_of(self, owner: OwnerId) -> Iterator[tuple[KittyId, Kitty]]:
        """Iterate an owner's kitties.

        Yields:
            (kitty_id, kitty) pairs in increasing id order.
        """
        owned = [(kitty_id, kitty) for (o, kitty_id), kitty in self._kitties.items() if o == owner]
        yield from sorted(owned, key=lambda pair: pair[0])

    def all_kitties(self) -> Iterator[tuple[OwnerId, KittyId, Kitty]]:
        """Iterate every stored kitty.

        Yields:
            (owner, kitty_id, kitty) triples in increasing id order.
        """
        entries = [(owner, kitty_id, kitty) for (owner, kitty_id), kitty in self._kitties.items()]
        yield from sorted(entries, key=lambda entry: entry[1])

    def __len__(self) -> int:
        return len(self._kitties)

    def snapshot(self) -> bytes:
        """Pickle entire state for serialization.

        Not efficient - use only for testing/prototyping, not production.

        Returns:
            Pickled bytes of storage state.
        """
        return pickle.dumps(
            {
                "id_limit": self._allocator.id_limit,
                "next_kitty_id": self._allocator.next_kitty_id,
                "kitties": {key: kitty.dna for key, kitty in self._kitties.items()},
            }
        )

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - Used only for local testing, not production
        self._allocator = KittyIdAllocator(
            id_limit=state["id_limit"], next_kitty_id=state["next_kitty_id"]
        )
        self._kitties = {key: Kitty(dna) for key, dna in state["kitties"].items()}
