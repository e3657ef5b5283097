"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from kitties import (
    CallCounter,
    FixedRandomness,
    InMemoryEventSink,
    KittiesModule,
    KittiesSettings,
    LocalKittyStore,
)


@pytest.fixture
def storage():
    """Fresh LocalKittyStore with the full u32 id space."""
    return LocalKittyStore()


@pytest.fixture
def events():
    return InMemoryEventSink()


@pytest.fixture
def call_counter():
    return CallCounter()


@pytest.fixture
def module(storage, events, call_counter):
    """KittiesModule with fixed entropy so DNA is reproducible."""
    return KittiesModule(
        storage=storage,
        randomness=FixedRandomness([b"seed-0", b"seed-1", b"seed-2"]),
        call_index=call_counter,
        events=events,
        settings=KittiesSettings(),
    )


@pytest.fixture
def small_module(events, call_counter):
    """KittiesModule whose id space holds only three kitties."""
    return KittiesModule(
        storage=LocalKittyStore(id_limit=3),
        randomness=FixedRandomness([b"seed"]),
        call_index=call_counter,
        events=events,
    )
