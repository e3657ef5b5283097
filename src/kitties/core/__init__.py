"""Core functionalities: stateless value types, errors and DNA operations.

Architecture Note:
    core/ holds pure, stateless building blocks with no runtime state mutation.
    For stateful services, see storage/ and runtime/.
"""

from kitties.core.errors import (
    BadOriginError,
    InvalidKittyIdError,
    KittiesError,
    KittyAlreadyExistsError,
    KittyIdOverflowError,
    RequireDistinctParentsError,
)
from kitties.core.kitty import (
    Gender,
    Kitty,
    combine_dna,
    derive_dna,
    encode_owner,
    encode_payload,
    gender_of,
)
from kitties.core.types import DNA_LENGTH, U32_MAX, KittyId, OwnerId

__all__ = [
    # Types
    "OwnerId",
    "KittyId",
    "DNA_LENGTH",
    "U32_MAX",
    # Kitty
    "Kitty",
    "Gender",
    "gender_of",
    "derive_dna",
    "combine_dna",
    "encode_owner",
    "encode_payload",
    # Errors
    "KittiesError",
    "KittyIdOverflowError",
    "InvalidKittyIdError",
    "RequireDistinctParentsError",
    "BadOriginError",
    "KittyAlreadyExistsError",
]
