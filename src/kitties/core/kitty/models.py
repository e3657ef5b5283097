"""Kitty value model.

Usage:
    kitty = Kitty(bytes(16))
    kitty.gender  # Gender.FEMALE
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kitties.core.types import DNA_LENGTH


class Gender(Enum):
    """Category derived from the lowest bit of the first DNA byte.

    Informational only: breeding does not require opposite genders.
    """

    MALE = "male"
    """First DNA byte is odd."""

    FEMALE = "female"
    """First DNA byte is even."""


def gender_of(dna: bytes) -> Gender:
    """Classify DNA by bit 0 of its first byte.

    Args:
        dna: Kitty DNA (at least one byte).

    Returns:
        Gender.MALE for an odd first byte, Gender.FEMALE for an even one.
    """
    return Gender.MALE if dna[0] & 1 else Gender.FEMALE


@dataclass(frozen=True, slots=True)
class Kitty:
    """Immutable 16-byte DNA payload. Breeding creates new kitties, never edits one."""

    dna: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.dna, bytes | bytearray):
            raise TypeError(f"Kitty DNA must be bytes, got {type(self.dna).__name__}")
        if len(self.dna) != DNA_LENGTH:
            raise ValueError(f"Kitty DNA must be {DNA_LENGTH} bytes, got {len(self.dna)}")
        if isinstance(self.dna, bytearray):
            object.__setattr__(self, "dna", bytes(self.dna))

    @property
    def gender(self) -> Gender:
        return gender_of(self.dna)

    def hex(self) -> str:
        return self.dna.hex()

    @classmethod
    def from_hex(cls, value: str) -> Kitty:
        return cls(bytes.fromhex(value))
