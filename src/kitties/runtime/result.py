"""Call descriptors and per-call outcomes for batch execution.

Usage:
    batch = [
        (SignedRequest("alice"), CreateCall()),
        (SignedRequest("alice"), BreedCall(0, 1)),
    ]
    for result in executor.execute(batch):
        if result.ok:
            print(result.event.kitty_id)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from kitties.core.errors import KittiesError
from kitties.core.types import KittyId
from kitties.runtime.events import KittyCreated


@dataclass(frozen=True, slots=True)
class CreateCall:
    """Create a kitty for the signer."""


@dataclass(frozen=True, slots=True)
class BreedCall:
    """Breed two of the signer's kitties."""

    kitty_id_1: KittyId
    kitty_id_2: KittyId


KittyCall: TypeAlias = CreateCall | BreedCall


@dataclass(frozen=True, slots=True)
class CallResult:
    """Outcome of one call: exactly one of event or error is set."""

    index: int
    event: KittyCreated | None = None
    error: KittiesError | None = None

    def __post_init__(self) -> None:
        if (self.event is None) == (self.error is None):
            raise ValueError("CallResult needs exactly one of event or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> KittyCreated:
        """Return the event, or raise the recorded error.

        Raises:
            KittiesError: The error the call failed with.
        """
        if self.error is not None:
            raise self.error
        assert self.event is not None
        return self.event
