"""
AES-256-GCM authenticated encryption.

The nonce and tag are returned as separate fields rather than appended to
the ciphertext; framing them is the codec's job.
"""

from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ecies.constants import AUTH_TAG_SIZE, NONCE_SIZE, SYMMETRIC_KEY_SIZE
from ecies.crypto.errors import (
    AuthenticationFailedError,
    InvalidKeyLengthError,
    InvalidParameterLengthError,
)
from ecies.crypto.random import RandomSource, draw


AUTHENTICATION_FAILED_MESSAGE = "Message authentication failed"


def encrypt_aes_gcm(
    key: bytes,
    plaintext: bytes,
    random_bytes: Optional[RandomSource] = None,
    associated_data: Optional[bytes] = None,
) -> Tuple[bytes, bytes, bytes]:
    """
    Encrypt data using AES-256-GCM.

    A fresh random 12-byte nonce is drawn for each call.

    Args:
        key: 32-byte encryption key
        plaintext: Data to encrypt
        random_bytes: Randomness source for the nonce (default: CSPRNG)
        associated_data: Optional additional authenticated data (AAD).
                        AAD is authenticated but not encrypted.

    Returns:
        Tuple of (nonce, ciphertext, auth_tag):
        - nonce: 12 bytes
        - ciphertext: Same length as plaintext
        - auth_tag: 16 bytes

    Raises:
        InvalidKeyLengthError: If key is not 32 bytes
    """
    if len(key) != SYMMETRIC_KEY_SIZE:
        raise InvalidKeyLengthError(f"Key must be {SYMMETRIC_KEY_SIZE} bytes")

    nonce = draw(random_bytes, NONCE_SIZE)

    # AESGCM.encrypt returns ciphertext + tag concatenated
    ciphertext_with_tag = AESGCM(bytes(key)).encrypt(nonce, bytes(plaintext), associated_data)

    ciphertext = ciphertext_with_tag[:-AUTH_TAG_SIZE]
    auth_tag = ciphertext_with_tag[-AUTH_TAG_SIZE:]

    return nonce, ciphertext, auth_tag


def decrypt_aes_gcm(
    key: bytes,
    nonce: bytes,
    ciphertext: bytes,
    auth_tag: bytes,
    associated_data: Optional[bytes] = None,
) -> bytes:
    """
    Decrypt data using AES-256-GCM.

    The tag is verified before any plaintext is released. On failure
    nothing is returned.

    Args:
        key: 32-byte decryption key
        nonce: 12-byte nonce (from encryption)
        ciphertext: Encrypted data
        auth_tag: 16-byte authentication tag (from encryption)
        associated_data: Optional AAD (must match encryption)

    Returns:
        Decrypted plaintext

    Raises:
        InvalidKeyLengthError: If key is not 32 bytes
        InvalidParameterLengthError: If nonce or tag are wrong length
        AuthenticationFailedError: If the tag does not verify (tampered
            data, wrong key or wrong AAD; the causes are not distinguished)
    """
    if len(key) != SYMMETRIC_KEY_SIZE:
        raise InvalidKeyLengthError(f"Key must be {SYMMETRIC_KEY_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise InvalidParameterLengthError(f"Nonce must be {NONCE_SIZE} bytes")
    if len(auth_tag) != AUTH_TAG_SIZE:
        raise InvalidParameterLengthError(f"Auth tag must be {AUTH_TAG_SIZE} bytes")

    # Reconstruct ciphertext + tag for decryption
    ciphertext_with_tag = bytes(ciphertext) + bytes(auth_tag)

    try:
        return AESGCM(bytes(key)).decrypt(bytes(nonce), ciphertext_with_tag, associated_data)
    except InvalidTag:
        raise AuthenticationFailedError(AUTHENTICATION_FAILED_MESSAGE) from None
