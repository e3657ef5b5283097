"""Events emitted by kitty operations.

Events are storage-agnostic and serialize to JSON-compatible dicts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kitties.core.kitty import Kitty
from kitties.core.types import KittyId, OwnerId


@dataclass(frozen=True, slots=True)
class KittyCreated:
    """A kitty was created by create() or breed().

    Attributes:
        owner: Owner the kitty is stored under.
        kitty_id: Newly allocated kitty id.
        kitty: The new kitty.

    Example:
        event = KittyCreated(owner="alice", kitty_id=0, kitty=Kitty(bytes(16)))
    """

    owner: OwnerId
    kitty_id: KittyId
    kitty: Kitty

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary (owner must already be JSON-friendly)."""
        return {
            "type": "kitty_created",
            "owner": self.owner,
            "kitty_id": self.kitty_id,
            "dna": self.kitty.hex(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KittyCreated:
        """Create from dictionary (for deserialization)."""
        return cls(
            owner=data["owner"],
            kitty_id=data["kitty_id"],
            kitty=Kitty.from_hex(data["dna"]),
        )
