"""Shared test fixtures."""

import os
from types import SimpleNamespace

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from policy_cache.caching.bounded_cache import BoundedCache


@pytest.fixture
def erased():
    """Recorder for on_erase callbacks."""
    calls = []

    def record(key, value):
        calls.append((key, value))

    record.calls = calls
    return record


@pytest.fixture
def make_cache(erased):
    """Factory: BoundedCache wired to the `erased` recorder."""

    def factory(capacity, policy=None):
        return BoundedCache(capacity, policy=policy, on_erase=erased)

    return factory


@pytest.fixture
def small_cfg():
    """Small simulation config, independent of policy_cache.config."""
    return SimpleNamespace(
        RANDOM_SEED=7,
        NUM_KEYS=50,
        ZIPF_ALPHA=1.0,
        NUM_REQUESTS=500,
        CACHE_SIZE=10,
        CACHE_POLICY="lru",
        NUM_RUNS=3,
        LOG_LEVEL="WARNING",
    )
