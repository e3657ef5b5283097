"""Sequential execution of a batch of signed kitty calls.

Each call's position within the batch is its DNA salt, so two creations by the
same owner in one batch differ even when they draw the same seed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from kitties.core.errors import KittiesError
from kitties.runtime.collaborators import OriginResolver
from kitties.runtime.events import KittyCreated
from kitties.runtime.module import KittiesModule
from kitties.runtime.result import BreedCall, CallResult, CreateCall, KittyCall
from kitties.runtime.sources import CallCounter

logger = logging.getLogger(__name__)


class BatchExecutor:
    """Runs calls one at a time, each to completion, recording their outcomes.

    User-facing errors become failed CallResults and do not stop the batch.
    Anything else (including KittyAlreadyExistsError) is an internal fault and
    propagates.

    Args:
        module: Module to dispatch calls to.
        resolver: Resolves each request to its signing owner.

    Raises:
        TypeError: If the module's call index provider is not a CallCounter,
            since the executor must set each call's position on it.
    """

    def __init__(self, module: KittiesModule, resolver: OriginResolver):
        call_counter = module.call_index
        if not isinstance(call_counter, CallCounter):
            raise TypeError(
                "BatchExecutor needs a module whose call_index is a CallCounter, "
                f"got {type(call_counter).__name__}"
            )
        self._module = module
        self._resolver = resolver
        self._call_counter = call_counter

    def dispatch(self, request: Any, call: KittyCall) -> KittyCreated:
        """Resolve the request's signer and run one call.

        Raises:
            BadOriginError: If the request is not signed.
            KittiesError: Whatever the dispatched operation raises.
            TypeError: If call is not a known call descriptor.
        """
        caller = self._resolver.resolve(request)
        match call:
            case CreateCall():
                return self._module.create(caller)
            case BreedCall(kitty_id_1=first, kitty_id_2=second):
                return self._module.breed(caller, first, second)
            case _:
                raise TypeError(f"Unknown kitty call: {call!r}")

    def execute(self, batch: Iterable[tuple[Any, KittyCall]]) -> list[CallResult]:
        """Execute calls in order.

        Args:
            batch: (request, call) pairs.

        Returns:
            One CallResult per call, in batch order.
        """
        results: list[CallResult] = []
        for index, (request, call) in enumerate(batch):
            self._call_counter.index = index
            try:
                event = self.dispatch(request, call)
            except KittiesError as e:
                logger.warning("Call %d (%s) rejected: %s", index, type(call).__name__, e)
                results.append(CallResult(index=index, error=e))
            else:
                results.append(CallResult(index=index, event=event))

        succeeded = sum(1 for r in results if r.ok)
        logger.info("Executed batch of %d calls (%d succeeded)", len(results), succeeded)
        return results
