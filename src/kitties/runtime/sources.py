"""Local implementations of the collaborator protocols.

Suitable for single-process use, scripts and tests. A hosting runtime
replaces these with its own authentication, randomness and event delivery.
"""

from __future__ import annotations

import secrets
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import cycle
from typing import Any

from kitties.core.errors import BadOriginError
from kitties.core.types import U32_MAX, OwnerId
from kitties.runtime.events import KittyCreated


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Request envelope carrying the signer's identity (None = unsigned)."""

    signer: OwnerId | None = None


class SignedOriginResolver:
    """Resolves SignedRequest envelopes to their signer."""

    def resolve(self, request: Any) -> OwnerId:
        """Return the signer of a request.

        Args:
            request: A SignedRequest.

        Returns:
            The signing owner.

        Raises:
            BadOriginError: If the request is not a SignedRequest or has no signer.
        """
        if not isinstance(request, SignedRequest):
            raise BadOriginError(f"Expected a SignedRequest, got {type(request).__name__}")
        if request.signer is None:
            raise BadOriginError("Request is not signed")
        return request.signer


class SystemRandomness:
    """Draws each seed from the operating system's CSPRNG.

    Args:
        seed_length: Number of bytes per seed.
    """

    def __init__(self, seed_length: int = 32):
        if seed_length < 1:
            raise ValueError(f"seed_length must be positive, got {seed_length}")
        self._seed_length = seed_length

    def random_seed(self) -> bytes:
        return secrets.token_bytes(self._seed_length)


class FixedRandomness:
    """Returns seeds from a fixed list, cycling when exhausted.

    Args:
        seeds: Seeds to hand out in order (at least one).
    """

    def __init__(self, seeds: Iterable[bytes]):
        self._seeds = [bytes(seed) for seed in seeds]
        if not self._seeds:
            raise ValueError("FixedRandomness needs at least one seed")
        self._iter: Iterator[bytes] = cycle(self._seeds)

    def random_seed(self) -> bytes:
        return next(self._iter)


class CallCounter:
    """Settable call-position provider.

    BatchExecutor sets the index before dispatching each call in a batch.
    """

    def __init__(self, index: int = 0):
        self.index = index

    @property
    def index(self) -> int:
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        if not 0 <= value <= U32_MAX:
            raise ValueError(f"Call index must fit in an unsigned 32-bit integer, got {value}")
        self._index = value

    def current_call_index(self) -> int:
        return self._index


class InMemoryEventSink:
    """Records published events in order."""

    def __init__(self) -> None:
        self._events: list[KittyCreated] = []

    def publish(self, event: KittyCreated) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[KittyCreated]:
        """Copy of events published so far, oldest first."""
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
