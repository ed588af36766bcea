"""
Cryptographic test utilities.

Key generation lives here because long-term key pairs are supplied to the
library by the caller; the library never generates them. These helpers
exist solely for:
1. Unit testing every key-agreement backend
2. Generating test vectors with a reproducible randomness source
"""
import hashlib
from typing import List, Optional

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from nacl.public import PrivateKey

from ecies.config import settings
from ecies.crypto import KeyPair

_EC_CURVES = {
    "secp256r1": ec.SECP256R1,
    "secp384r1": ec.SECP384R1,
    "secp521r1": ec.SECP521R1,
}

# RFC 7748 section 6.1
RFC7748_ALICE_PRIVATE = bytes.fromhex("77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a")
RFC7748_ALICE_PUBLIC = bytes.fromhex("8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a")
RFC7748_BOB_PRIVATE = bytes.fromhex("5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb")
RFC7748_BOB_PUBLIC = bytes.fromhex("de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f")
RFC7748_SHARED_SECRET = bytes.fromhex("4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742")


def generate_x25519_keypair() -> KeyPair:
    """Generate a raw-bytes X25519 keypair (32-byte private and public keys)."""
    private_key = PrivateKey.generate()
    return KeyPair(private_key=bytes(private_key), public_key=bytes(private_key.public_key))


def generate_keypair(curve: Optional[str] = None) -> KeyPair:
    """
    Generate a keypair of cryptography key objects.

    Args:
        curve: One of "x25519", "secp256r1", "secp384r1", "secp521r1"
               (default: settings.DEFAULT_CURVE)
    """
    curve = curve or settings.DEFAULT_CURVE

    if curve == "x25519":
        private_key = X25519PrivateKey.generate()
    elif curve in _EC_CURVES:
        private_key = ec.generate_private_key(_EC_CURVES[curve]())
    else:
        raise ValueError(f"Unsupported curve: {curve}")

    return KeyPair(private_key=private_key, public_key=private_key.public_key())


def zero_random_bytes(length: int) -> bytes:
    """Randomness source returning all-zero bytes. Test vectors only."""
    return bytes(length)


class DeterministicRandom:
    """
    Reproducible randomness source: SHA-256(seed || counter) stream.

    Records the size of every draw so tests can check what was requested.
    NEVER use outside tests.
    """

    def __init__(self, seed: bytes = b"ecies-test-seed"):
        self.seed = seed
        self.counter = 0
        self.requests: List[int] = []

    def __call__(self, length: int) -> bytes:
        self.requests.append(length)
        output = b""
        while len(output) < length:
            block = hashlib.sha256(self.seed + self.counter.to_bytes(8, "big")).digest()
            self.counter += 1
            output += block
        return output[:length]
