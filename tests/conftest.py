"""Shared pytest fixtures for the key generation test suite."""

import pytest

from rsa_keygen.random import Random

SEED = 20241018


@pytest.fixture()
def rand():
    """Provide a deterministic randomness source."""
    return Random.from_seed(SEED)


@pytest.fixture()
def make_rand():
    """Factory fixture to create independent sources from chosen seeds."""
    def _make(seed=SEED):
        return Random.from_seed(seed)
    return _make
