"""KittiesModule: create and breed kitties against an injected registry.

Usage:
    module = KittiesModule()

    # Mint a kitty from fresh entropy
    created = module.create("alice")

    # Breed two of alice's kitties into a third
    first = module.create("alice")
    child = module.breed("alice", created.kitty_id, first.kitty_id)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from kitties.config import KittiesSettings
from kitties.core.errors import InvalidKittyIdError, RequireDistinctParentsError
from kitties.core.kitty import Gender, Kitty, combine_dna, derive_dna
from kitties.core.types import KittyId, OwnerId
from kitties.runtime.collaborators import CallIndexProvider, EventSink, Randomness
from kitties.runtime.events import KittyCreated
from kitties.runtime.sources import CallCounter, InMemoryEventSink, SystemRandomness
from kitties.storage.local import LocalKittyStore
from kitties.storage.protocol import KittyStore

logger = logging.getLogger(__name__)


class KittiesModule:
    """Orchestrates kitty creation and breeding.

    Owns the registry it is given and consults the randomness, call index and
    event collaborators once per call. Calls must be serialized by the caller;
    each one either commits all of its writes or none.

    Every failure is raised before the first write, so the counter and the
    registry are unchanged by a failed call and no event is published.
    """

    def __init__(
        self,
        storage: KittyStore | None = None,
        randomness: Randomness | None = None,
        call_index: CallIndexProvider | None = None,
        events: EventSink | None = None,
        settings: KittiesSettings | None = None,
    ):
        # Explicit None checks: empty stores and sinks are falsy.
        self._settings = settings if settings is not None else KittiesSettings()
        if storage is None:
            storage = LocalKittyStore(id_limit=self._settings.id_limit)
        if randomness is None:
            randomness = SystemRandomness(self._settings.seed_length)
        if call_index is None:
            call_index = CallCounter()
        if events is None:
            events = InMemoryEventSink()
        self._storage = storage
        self._randomness = randomness
        self._call_index = call_index
        self._events = events

    @property
    def storage(self) -> KittyStore:
        return self._storage

    @property
    def call_index(self) -> CallIndexProvider:
        """Provider the DNA salt is read from on every call."""
        return self._call_index

    @property
    def events(self) -> EventSink:
        return self._events

    @property
    def next_kitty_id(self) -> KittyId:
        return self._storage.next_kitty_id

    def _fresh_dna(self, caller: OwnerId) -> bytes:
        seed = self._randomness.random_seed()
        salt = self._call_index.current_call_index()
        return derive_dna(seed, caller, salt)

    def _publish(self, caller: OwnerId, kitty_id: KittyId, kitty: Kitty) -> KittyCreated:
        event = KittyCreated(owner=caller, kitty_id=kitty_id, kitty=kitty)
        self._events.publish(event)
        logger.debug("Kitty %d created for %r (%s)", kitty_id, caller, kitty.gender.value)
        return event

    def create(self, caller: OwnerId) -> KittyCreated:
        """Create a kitty with DNA derived from fresh entropy.

        Args:
            caller: Owner resolved from the signed request.

        Returns:
            The published KittyCreated event.

        Raises:
            KittyIdOverflowError: If the kitty id space is exhausted.
        """
        with self._storage.id_reservation() as kitty_id:
            kitty = Kitty(self._fresh_dna(caller))
            self._storage.insert(caller, kitty_id, kitty)
        return self._publish(caller, kitty_id, kitty)

    def breed(self, caller: OwnerId, kitty_id_1: KittyId, kitty_id_2: KittyId) -> KittyCreated:
        """Breed two of the caller's kitties into a new one.

        Each child DNA bit comes from the first parent where a freshly derived
        selector bit is set, and from the second parent otherwise. Parents are
        not modified. Genders are not checked.

        Args:
            caller: Owner resolved from the signed request. Must own both parents.
            kitty_id_1: First parent.
            kitty_id_2: Second parent.

        Returns:
            The published KittyCreated event for the child.

        Raises:
            RequireDistinctParentsError: If both ids are equal (checked first,
                whether or not the kitty exists).
            InvalidKittyIdError: If a parent is not stored under the caller.
            KittyIdOverflowError: If the kitty id space is exhausted.
        """
        if kitty_id_1 == kitty_id_2:
            raise RequireDistinctParentsError(
                f"Cannot breed kitty {kitty_id_1} with itself; parents must be distinct"
            )

        parent_1 = self._owned_kitty(caller, kitty_id_1)
        parent_2 = self._owned_kitty(caller, kitty_id_2)

        selector = self._fresh_dna(caller)
        child = Kitty(combine_dna(parent_1.dna, parent_2.dna, selector))

        with self._storage.id_reservation() as kitty_id:
            self._storage.insert(caller, kitty_id, child)
        return self._publish(caller, kitty_id, child)

    def _owned_kitty(self, caller: OwnerId, kitty_id: KittyId) -> Kitty:
        kitty = self._storage.get(caller, kitty_id)
        if kitty is None:
            raise InvalidKittyIdError(f"Invalid kitty id {kitty_id}")
        return kitty

    # Read helpers

    def kitty(self, owner: OwnerId, kitty_id: KittyId) -> Kitty | None:
        """Get a kitty stored under owner, or None."""
        return self._storage.get(owner, kitty_id)

    def kitties_of(self, owner: OwnerId) -> Iterator[tuple[KittyId, Kitty]]:
        """Iterate an owner's kitties in id order."""
        return self._storage.kitties_of(owner)

    def gender(self, owner: OwnerId, kitty_id: KittyId) -> Gender:
        """Gender of one of owner's kitties.

        Raises:
            InvalidKittyIdError: If owner holds no kitty with that id.
        """
        return self._owned_kitty(owner, kitty_id).gender
