"""Core type definitions for Kitties."""

from collections.abc import Hashable
from typing import TypeAlias

OwnerId: TypeAlias = Hashable
"""Opaque identity of a kitty's owner, supplied by the origin resolver.

Only equality and hashing are relied on for storage. Deriving DNA additionally
needs a canonical byte form (see `kitties.core.kitty.operations.encode_owner`).
"""

KittyId: TypeAlias = int
"""Globally unique, strictly increasing unsigned 32-bit kitty identifier."""

DNA_LENGTH = 16
"""Every kitty carries exactly this many bytes of DNA."""

U32_MAX = 2**32 - 1
