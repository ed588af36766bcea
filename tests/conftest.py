"""
Shared test fixtures for ECIES tests.

Alice and Bob are the sender and recipient; Eve is a third party whose
keys must never open messages addressed to Bob.
"""
import pytest

from ecies.crypto import KeyPair
from tests.utils.crypto_test_utils import (
    DeterministicRandom,
    generate_keypair,
    generate_x25519_keypair,
)

BACKENDS = ["raw-x25519", "x25519", "secp256r1", "secp384r1", "secp521r1"]


def make_keypair(backend: str) -> KeyPair:
    """Generate a keypair for one of BACKENDS."""
    if backend == "raw-x25519":
        return generate_x25519_keypair()
    return generate_keypair(backend)


@pytest.fixture(params=BACKENDS)
def backend(request) -> str:
    """Parametrize a test over every key-agreement backend."""
    return request.param


@pytest.fixture
def alice(backend) -> KeyPair:
    return make_keypair(backend)


@pytest.fixture
def bob(backend) -> KeyPair:
    return make_keypair(backend)


@pytest.fixture
def eve(backend) -> KeyPair:
    return make_keypair(backend)


@pytest.fixture
def x25519_alice() -> KeyPair:
    return generate_x25519_keypair()


@pytest.fixture
def x25519_bob() -> KeyPair:
    return generate_x25519_keypair()


@pytest.fixture
def deterministic_random() -> DeterministicRandom:
    return DeterministicRandom()
