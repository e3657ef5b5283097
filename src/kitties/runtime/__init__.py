"""Kitty operations and their collaborators.

Architecture Note:
    runtime/ is a stateful service layer that coordinates the registry,
    the DNA operations and the injected collaborators. Unlike core/
    (stateless functionalities), runtime/ drives state changes.
"""

from kitties.runtime.collaborators import (
    CallIndexProvider,
    EventSink,
    OriginResolver,
    Randomness,
)
from kitties.runtime.events import KittyCreated
from kitties.runtime.executor import BatchExecutor
from kitties.runtime.module import KittiesModule
from kitties.runtime.result import BreedCall, CallResult, CreateCall, KittyCall
from kitties.runtime.sources import (
    CallCounter,
    FixedRandomness,
    InMemoryEventSink,
    SignedOriginResolver,
    SignedRequest,
    SystemRandomness,
)

__all__ = [
    "KittiesModule",
    "KittyCreated",
    "BatchExecutor",
    "CreateCall",
    "BreedCall",
    "KittyCall",
    "CallResult",
    # Collaborators
    "OriginResolver",
    "Randomness",
    "CallIndexProvider",
    "EventSink",
    "SignedRequest",
    "SignedOriginResolver",
    "SystemRandomness",
    "FixedRandomness",
    "CallCounter",
    "InMemoryEventSink",
]
