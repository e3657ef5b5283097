"""Kitties: deterministic kitty registry and breeding engine.

Usage:
    from kitties import KittiesModule, FixedRandomness

    module = KittiesModule(randomness=FixedRandomness([b"block-seed"]))

    mum = module.create("alice")
    dad = module.create("alice")
    kitten = module.breed("alice", mum.kitty_id, dad.kitty_id)

    module.kitty("alice", kitten.kitty_id)
"""

__version__ = "0.1.0"

# Configuration
from kitties.config import KittiesSettings, configure_logging

# Core primitives
from kitties.core import (
    DNA_LENGTH,
    BadOriginError,
    Gender,
    InvalidKittyIdError,
    KittiesError,
    Kitty,
    KittyAlreadyExistsError,
    KittyId,
    KittyIdOverflowError,
    OwnerId,
    RequireDistinctParentsError,
    combine_dna,
    derive_dna,
    gender_of,
)

# Runtime
from kitties.runtime import (
    BatchExecutor,
    BreedCall,
    CallCounter,
    CallResult,
    CreateCall,
    FixedRandomness,
    InMemoryEventSink,
    KittiesModule,
    KittyCreated,
    SignedOriginResolver,
    SignedRequest,
    SystemRandomness,
)

# Storage
from kitties.storage import (
    KittyIdAllocator,
    KittyStore,
    LocalKittyStore,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Kitty",
    "KittyId",
    "OwnerId",
    "Gender",
    "DNA_LENGTH",
    "gender_of",
    "derive_dna",
    "combine_dna",
    # Errors
    "KittiesError",
    "KittyIdOverflowError",
    "InvalidKittyIdError",
    "RequireDistinctParentsError",
    "BadOriginError",
    "KittyAlreadyExistsError",
    # Storage
    "KittyStore",
    "LocalKittyStore",
    "KittyIdAllocator",
    # Runtime
    "KittiesModule",
    "KittyCreated",
    "BatchExecutor",
    "CreateCall",
    "BreedCall",
    "CallResult",
    "SignedRequest",
    "SignedOriginResolver",
    "SystemRandomness",
    "FixedRandomness",
    "CallCounter",
    "InMemoryEventSink",
    # Config
    "KittiesSettings",
    "configure_logging",
]
