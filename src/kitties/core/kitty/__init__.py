"""Kitty functionality: the DNA value model and pure DNA operations."""

from kitties.core.kitty.models import Gender, Kitty, gender_of
from kitties.core.kitty.operations import combine_dna, derive_dna, encode_owner, encode_payload

__all__ = [
    "Kitty",
    "Gender",
    "gender_of",
    "derive_dna",
    "combine_dna",
    "encode_owner",
    "encode_payload",
]
