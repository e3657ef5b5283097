"""Kitty id allocation service.

KittyIdAllocator is a stateful service that owns the NextKittyId counter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from kitties.core.errors import KittyIdOverflowError
from kitties.core.types import U32_MAX, KittyId

logger = logging.getLogger(__name__)


class KittyIdAllocator:
    """Issues strictly increasing kitty ids starting at 0, never reusing one.

    The counter can never exceed id_limit, so the largest id ever issued is
    id_limit - 1. With the default limit this mirrors a u32 counter guarded by
    a checked add.

    Args:
        id_limit: Highest value the counter may reach (default u32 max).
        next_kitty_id: Starting counter value, for restoring saved state.
    """

    def __init__(self, id_limit: int = U32_MAX, next_kitty_id: KittyId = 0):
        if not 0 <= id_limit <= U32_MAX:
            raise ValueError(f"id_limit must be between 0 and {U32_MAX}, got {id_limit}")
        if not 0 <= next_kitty_id <= id_limit:
            raise ValueError(
                f"next_kitty_id must be between 0 and id_limit ({id_limit}), got {next_kitty_id}"
            )
        self._id_limit = id_limit
        self._next_kitty_id = next_kitty_id

    @property
    def id_limit(self) -> int:
        return self._id_limit

    @property
    def next_kitty_id(self) -> KittyId:
        """Id the next successful reservation will return."""
        return self._next_kitty_id

    def _check_available(self) -> KittyId:
        kitty_id = self._next_kitty_id
        if kitty_id >= self._id_limit:
            raise KittyIdOverflowError(
                f"Kitty id space exhausted: next id {kitty_id} reached limit {self._id_limit}"
            )
        return kitty_id

    def reserve(self) -> KittyId:
        """Return the current counter and advance it by one.

        Returns:
            The reserved kitty id.

        Raises:
            KittyIdOverflowError: If the counter is at its limit. The counter
                is left unchanged.
        """
        kitty_id = self._check_available()
        self._next_kitty_id = kitty_id + 1
        logger.debug("Reserved kitty id %d", kitty_id)
        return kitty_id

    @contextmanager
    def reservation(self) -> Iterator[KittyId]:
        """Reserve an id that only counts once the with-block succeeds.

        Yields the id reserve() would return. The counter advances when the
        block exits cleanly and is left untouched if it raises.

        Raises:
            KittyIdOverflowError: On entry, if the counter is at its limit.

        Example:
            >>> with allocator.reservation() as kitty_id:
            ...     store.insert(owner, kitty_id, kitty)
        """
        kitty_id = self._check_available()
        yield kitty_id
        if self._next_kitty_id != kitty_id:
            raise RuntimeError(
                f"Counter moved from {kitty_id} to {self._next_kitty_id} during a reservation"
            )
        self._next_kitty_id = kitty_id + 1
        logger.debug("Committed kitty id reservation %d", kitty_id)
