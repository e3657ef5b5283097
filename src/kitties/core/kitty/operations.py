"""Pure functions for deriving and combining kitty DNA.

These are stateless: the same inputs always produce the same DNA, so any call
can be replayed later from its recorded seed and salt.
"""

from __future__ import annotations

import hashlib

from kitties.core.types import DNA_LENGTH, U32_MAX, OwnerId

_OWNER_INT_BYTES = 32

# One-byte kind tags keep owners of different types from encoding alike.
_TAG_BYTES = b"b"
_TAG_STR = b"s"
_TAG_INT = b"i"
_TAG_OBJECT = b"o"


def encode_owner(owner: OwnerId) -> bytes:
    """Canonical byte form of an owner identity.

    The first byte tags the owner's kind, so "alice", b"alice" and an object
    whose __bytes__ is b"alice" all encode differently.

    Args:
        owner: bytes, str, non-negative int below 2**256, or any object
            defining __bytes__.

    Returns:
        Bytes identifying the owner for hashing.

    Raises:
        TypeError: If the owner has no canonical byte form.
        ValueError: If an integer owner is negative or too large.
    """
    if isinstance(owner, bytes | bytearray):
        return _TAG_BYTES + bytes(owner)
    if isinstance(owner, str):
        return _TAG_STR + owner.encode("utf-8")
    if isinstance(owner, int) and not isinstance(owner, bool):
        if owner < 0:
            raise ValueError(f"Integer owner ids must be non-negative, got {owner}")
        if owner.bit_length() > 8 * _OWNER_INT_BYTES:
            raise ValueError(
                f"Integer owner ids must fit in {_OWNER_INT_BYTES} bytes, "
                f"got {owner.bit_length()} bits"
            )
        return _TAG_INT + owner.to_bytes(_OWNER_INT_BYTES, "little")
    if hasattr(owner, "__bytes__"):
        return _TAG_OBJECT + bytes(owner)  # type: ignore[call-overload]
    raise TypeError(f"Owner of type {type(owner).__name__} has no canonical byte encoding")


def _length_prefixed(part: bytes) -> bytes:
    return len(part).to_bytes(4, "little") + part


def encode_payload(seed: bytes, actor: OwnerId, salt: int) -> bytes:
    """Encode (seed, actor, salt) unambiguously for hashing.

    Each part is prefixed with its 4-byte little-endian length; the salt is a
    little-endian u32.

    Raises:
        TypeError: If seed is not bytes or actor cannot be encoded.
        ValueError: If salt is outside the u32 range.
    """
    if not isinstance(seed, bytes | bytearray):
        raise TypeError(f"Seed must be bytes, got {type(seed).__name__}")
    if isinstance(salt, bool) or not isinstance(salt, int):
        raise TypeError(f"Salt must be an int, got {type(salt).__name__}")
    if not 0 <= salt <= U32_MAX:
        raise ValueError(f"Salt must fit in an unsigned 32-bit integer, got {salt}")
    return b"".join(
        (
            _length_prefixed(bytes(seed)),
            _length_prefixed(encode_owner(actor)),
            _length_prefixed(salt.to_bytes(4, "little")),
        )
    )


def derive_dna(seed: bytes, actor: OwnerId, salt: int) -> bytes:
    """Derive 16 bytes of DNA from entropy, caller identity and a per-call salt.

    Uses BLAKE2b with a 16-byte digest. Holds no state between calls; distinct
    outputs come only from distinct inputs.

    Args:
        seed: Entropy supplied by the randomness source for this call.
        actor: Owner making the call.
        salt: Per-call salt, usually the call's position within its batch.

    Returns:
        DNA_LENGTH bytes.
    """
    payload = encode_payload(seed, actor, salt)
    return hashlib.blake2b(payload, digest_size=DNA_LENGTH).digest()


def combine_dna(parent_a: bytes, parent_b: bytes, selector: bytes) -> bytes:
    """Bitwise multiplex two parents' DNA under a selector mask.

    Each output bit comes from parent_a where the selector bit is 1 and from
    parent_b where it is 0:
        child[i] = (selector[i] & a[i]) | (~selector[i] & b[i])

    Args:
        parent_a: DNA chosen by set selector bits.
        parent_b: DNA chosen by clear selector bits.
        selector: Mask deciding the source of each bit.

    Returns:
        Child DNA.

    Raises:
        ValueError: If any input is not DNA_LENGTH bytes long.
    """
    for name, value in (("parent_a", parent_a), ("parent_b", parent_b), ("selector", selector)):
        if len(value) != DNA_LENGTH:
            raise ValueError(f"{name} must be {DNA_LENGTH} bytes, got {len(value)}")

    return bytes(
        (s & a) | (~s & 0xFF & b) for a, b, s in zip(parent_a, parent_b, selector, strict=True)
    )
