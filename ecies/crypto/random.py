"""
Randomness source for salts and nonces.

A randomness source is any callable taking a byte count and returning that
many bytes. Production code uses the secrets module (CSPRNG, thread-safe).
Callers may pass their own source explicitly, e.g. a deterministic one when
generating test vectors.
"""

import secrets
from typing import Callable, Optional

RandomSource = Callable[[int], bytes]


def default_random_bytes(length: int) -> bytes:
    """Return `length` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(length)


def draw(random_bytes: Optional[RandomSource], length: int) -> bytes:
    """
    Draw `length` bytes from `random_bytes`, or from the CSPRNG if None.

    Raises:
        ValueError: If the source returns the wrong number of bytes
    """
    source = random_bytes or default_random_bytes
    data = bytes(source(length))
    if len(data) != length:
        raise ValueError(f"Random source returned {len(data)} bytes, expected {length}")
    return data
