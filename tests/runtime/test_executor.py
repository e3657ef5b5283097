"""Tests for BatchExecutor.

Why these tests exist:
- The call's position in its batch is the DNA salt
- Rejected calls are reported, not raised, and do not stop the batch
- Internal faults must not be disguised as call errors
"""

import pytest

from kitties import (
    BadOriginError,
    BatchExecutor,
    BreedCall,
    CallCounter,
    CallResult,
    CreateCall,
    FixedRandomness,
    InvalidKittyIdError,
    KittiesModule,
    Kitty,
    KittyAlreadyExistsError,
    RequireDistinctParentsError,
    SignedOriginResolver,
    SignedRequest,
    derive_dna,
)

ALICE = SignedRequest("alice")
BOB = SignedRequest("bob")


@pytest.fixture
def counter():
    return CallCounter()


@pytest.fixture
def kitties(counter):
    return KittiesModule(randomness=FixedRandomness([b"block"]), call_index=counter)


@pytest.fixture
def executor(kitties):
    return BatchExecutor(kitties, SignedOriginResolver())


def test_batch_position_salts_dna(executor, counter):
    """Same owner and seed in one batch still yields distinct kitties."""
    results = executor.execute([(ALICE, CreateCall()), (ALICE, CreateCall())])

    first, second = (r.unwrap() for r in results)
    assert first.kitty.dna == derive_dna(b"block", "alice", 0)
    assert second.kitty.dna == derive_dna(b"block", "alice", 1)
    assert first.kitty != second.kitty
    assert counter.current_call_index() == 1


def test_batch_salts_module_with_default_call_index():
    """CRITICAL: the executor drives the counter the module actually reads.

    Why: salting a counter the module never consults gives every call salt 0,
    so repeated creations under one seed would share DNA.
    """
    module = KittiesModule(randomness=FixedRandomness([b"block"]))
    executor = BatchExecutor(module, SignedOriginResolver())

    results = executor.execute([(ALICE, CreateCall()), (ALICE, CreateCall())])

    first, second = (r.unwrap() for r in results)
    assert first.kitty != second.kitty
    assert second.kitty.dna == derive_dna(b"block", "alice", 1)


class _FixedCallIndex:
    def current_call_index(self) -> int:
        return 0


def test_executor_rejects_unsettable_call_index():
    module = KittiesModule(call_index=_FixedCallIndex())

    with pytest.raises(TypeError, match="CallCounter"):
        BatchExecutor(module, SignedOriginResolver())


def test_failed_calls_do_not_stop_batch(executor, kitties):
    results = executor.execute(
        [
            (ALICE, CreateCall()),
            (ALICE, CreateCall()),
            (ALICE, BreedCall(0, 0)),
            (BOB, BreedCall(0, 1)),
            (SignedRequest(None), CreateCall()),
            (ALICE, BreedCall(0, 1)),
        ]
    )

    assert [r.index for r in results] == list(range(6))
    assert [r.ok for r in results] == [True, True, False, False, False, True]
    assert isinstance(results[2].error, RequireDistinctParentsError)
    assert isinstance(results[3].error, InvalidKittyIdError)
    assert isinstance(results[4].error, BadOriginError)
    assert results[5].unwrap().kitty_id == 2
    assert kitties.next_kitty_id == 3


def test_unwrap_raises_recorded_error(executor):
    (result,) = executor.execute([(ALICE, BreedCall(3, 3))])

    with pytest.raises(RequireDistinctParentsError):
        result.unwrap()


def test_dispatch_rejects_unsigned_envelope(executor):
    with pytest.raises(BadOriginError):
        executor.dispatch("alice", CreateCall())


def test_dispatch_rejects_unknown_call(executor):
    with pytest.raises(TypeError, match="Unknown kitty call"):
        executor.dispatch(ALICE, object())  # type: ignore[arg-type]


def test_internal_fault_propagates(executor, kitties):
    """An integrity fault is not a call error and must escape the batch."""
    # Write slot 0 behind the allocator's back so the next create collides.
    kitties.storage.insert("alice", 0, Kitty(bytes(16)))

    with pytest.raises(KittyAlreadyExistsError):
        executor.execute([(ALICE, CreateCall())])
    assert kitties.next_kitty_id == 0, "Failed insert must not consume the id"


@pytest.mark.parametrize(
    "kwargs",
    [{"index": 0}, {"index": 0, "event": object(), "error": RuntimeError()}],
    ids=["neither", "both"],
)
def test_call_result_needs_exactly_one_outcome(kwargs):
    with pytest.raises(ValueError, match="exactly one"):
        CallResult(**kwargs)
