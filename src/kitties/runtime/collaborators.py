"""Protocols for the collaborators a kitties module depends on.

The embedding runtime supplies authentication, entropy, call positions and
event delivery. Each is consulted synchronously at a single point per call,
so tests can substitute fixed values and assert exact DNA.

Usage:
    module = KittiesModule(
        randomness=FixedRandomness([b"seed"]),
        call_index=CallCounter(),
        events=InMemoryEventSink(),
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from kitties.core.types import OwnerId

if TYPE_CHECKING:
    from kitties.runtime.events import KittyCreated


@runtime_checkable
class OriginResolver(Protocol):
    """Resolves an incoming request to the owner that signed it."""

    def resolve(self, request: Any) -> OwnerId:
        """Return the request's signer.

        Raises:
            BadOriginError: If the request is not signed.
        """
        ...


@runtime_checkable
class Randomness(Protocol):
    """Source of per-call entropy.

    Unpredictable before the call; the returned seed is what must be recorded
    to replay the call later.
    """

    def random_seed(self) -> bytes:
        """Return the entropy seed for the current call."""
        ...


@runtime_checkable
class CallIndexProvider(Protocol):
    """Supplies the position of the current call within its batch."""

    def current_call_index(self) -> int:
        """Return the current call's position (used as DNA salt)."""
        ...


@runtime_checkable
class EventSink(Protocol):
    """Receives events for successfully committed calls."""

    def publish(self, event: KittyCreated) -> None:
        """Deliver an event."""
        ...
