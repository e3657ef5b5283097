"""Error taxonomy for kitty calls.

KittiesError subclasses are user-facing: they abort a call before any write and
are reported verbatim to the caller. KittyAlreadyExistsError is an internal
consistency fault and deliberately sits outside that hierarchy.
"""

from __future__ import annotations


class KittiesError(Exception):
    """Base class for errors returned to the caller of a kitty operation."""

    pass


class KittyIdOverflowError(KittiesError):
    """Raised when the kitty id space is exhausted."""

    pass


class InvalidKittyIdError(KittiesError):
    """Raised when a kitty does not exist under the caller's ownership.

    Missing kitties and kitties owned by someone else are reported identically.
    """

    pass


class RequireDistinctParentsError(KittiesError):
    """Raised when both parents of a breeding call are the same kitty."""

    pass


class BadOriginError(KittiesError):
    """Raised when a request cannot be resolved to a signing owner."""

    pass


class KittyAlreadyExistsError(RuntimeError):
    """Raised when an (owner, kitty_id) slot is written twice."""

    pass
