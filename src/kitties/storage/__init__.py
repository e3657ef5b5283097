"""Storage backends."""

from kitties.storage.allocator import KittyIdAllocator
from kitties.storage.local import LocalKittyStore
from kitties.storage.protocol import KittyStore

__all__ = [
    "KittyStore",
    "LocalKittyStore",
    "KittyIdAllocator",
]
