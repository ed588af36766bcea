"""
Key derivation: stretches an ECDH shared secret into an AES-256 key.

    symmetric_key = SHA-256(shared_secret || salt)

The digest length equals the AES-256 key length, so the digest is used as
the key directly with no truncation or expansion.
"""

from typing import Optional

from cryptography.hazmat.primitives import hashes

from ecies.constants import SALT_SIZE
from ecies.crypto.errors import InvalidParameterLengthError
from ecies.crypto.random import RandomSource, draw


def generate_salt(random_bytes: Optional[RandomSource] = None) -> bytes:
    """
    Generate a fresh 16-byte KDF salt.

    Args:
        random_bytes: Randomness source (default: CSPRNG)

    Returns:
        16 random bytes. The salt is public and travels with the ciphertext.
    """
    return draw(random_bytes, SALT_SIZE)


def derive_key(shared_secret: bytes, salt: bytes) -> bytes:
    """
    Derive a 32-byte symmetric key from a shared secret and salt.

    Deterministic: the recipient recomputes the same key from the salt
    carried in the wire message.

    Args:
        shared_secret: Raw ECDH output (must not be empty)
        salt: 16-byte per-message salt

    Returns:
        32-byte key

    Raises:
        InvalidParameterLengthError: If shared_secret is empty or salt is not 16 bytes
    """
    if not shared_secret:
        raise InvalidParameterLengthError("Shared secret cannot be empty")
    if len(salt) != SALT_SIZE:
        raise InvalidParameterLengthError(f"Salt must be {SALT_SIZE} bytes")

    digest = hashes.Hash(hashes.SHA256())
    digest.update(bytes(shared_secret))
    digest.update(bytes(salt))
    return digest.finalize()
