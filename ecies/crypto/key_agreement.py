"""
ECDH key agreement over opaque key handles.

Supported handle kinds:
- Raw 32-byte X25519 keys (bytes), computed with libsodium via PyNaCl
- cryptography X25519PrivateKey / X25519PublicKey
- cryptography EllipticCurvePrivateKey / EllipticCurvePublicKey

Both handles passed to agree() must be of the same kind and, for the
elliptic-curve kind, on the same curve. The ECIES layer never looks inside
a handle; it only passes it here.
"""

from dataclasses import dataclass
from typing import Any

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)
from nacl.bindings import crypto_scalarmult
from nacl.exceptions import CryptoError

from ecies.constants import X25519_KEY_SIZE
from ecies.crypto.errors import InvalidKeyError


_RAW_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class KeyPair:
    """
    Static key pair held by one party.

    Attributes:
        private_key: Private key handle (KEEP SECRET, never transmitted)
        public_key: Public key handle (safe to share)
    """

    private_key: Any
    public_key: Any

    def __post_init__(self):
        if isinstance(self.private_key, _RAW_TYPES) and len(self.private_key) != X25519_KEY_SIZE:
            raise InvalidKeyError("Private key must be 32 bytes")
        if isinstance(self.public_key, _RAW_TYPES) and len(self.public_key) != X25519_KEY_SIZE:
            raise InvalidKeyError("Public key must be 32 bytes")


def agree(private_key: Any, peer_public_key: Any) -> bytes:
    """
    Compute the ECDH shared secret between our private key and a peer's public key.

    The result is symmetric: agree(alice.private_key, bob.public_key) equals
    agree(bob.private_key, alice.public_key).

    Args:
        private_key: Our private key handle
        peer_public_key: The other party's public key handle

    Returns:
        Raw shared secret bytes. Not uniformly random; derive a key from it
        before use.

    Raises:
        InvalidKeyError: If the keys are malformed, of different kinds,
            on different curves, or rejected by the primitive

    Example:
        >>> alice = X25519PrivateKey.generate()
        >>> bob = X25519PrivateKey.generate()
        >>> agree(alice, bob.public_key()) == agree(bob, alice.public_key())
        True
    """
    if isinstance(private_key, _RAW_TYPES):
        return _agree_raw_x25519(bytes(private_key), peer_public_key)

    if isinstance(private_key, X25519PrivateKey):
        if not isinstance(peer_public_key, X25519PublicKey):
            raise InvalidKeyError("Peer public key is not an X25519 key")
        try:
            return private_key.exchange(peer_public_key)
        except ValueError:
            raise InvalidKeyError("X25519 key agreement failed") from None

    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        if not isinstance(peer_public_key, ec.EllipticCurvePublicKey):
            raise InvalidKeyError("Peer public key is not an elliptic-curve key")
        if private_key.curve.name != peer_public_key.curve.name:
            raise InvalidKeyError(
                f"Curve mismatch: {private_key.curve.name} private key, "
                f"{peer_public_key.curve.name} public key"
            )
        try:
            return private_key.exchange(ec.ECDH(), peer_public_key)
        except ValueError:
            raise InvalidKeyError("ECDH key agreement failed") from None

    raise InvalidKeyError(f"Unsupported private key type: {type(private_key).__name__}")


def _agree_raw_x25519(private_key: bytes, peer_public_key: Any) -> bytes:
    if not isinstance(peer_public_key, _RAW_TYPES):
        raise InvalidKeyError("Peer public key is not a raw X25519 key")
    peer_public_key = bytes(peer_public_key)

    if len(private_key) != X25519_KEY_SIZE:
        raise InvalidKeyError("Private key must be 32 bytes")
    if len(peer_public_key) != X25519_KEY_SIZE:
        raise InvalidKeyError("Public key must be 32 bytes")

    try:
        # libsodium rejects low-order points (all-zero output)
        return crypto_scalarmult(private_key, peer_public_key)
    except CryptoError:
        raise InvalidKeyError("X25519 key agreement failed") from None
