"""Elliptic-Curve Integrated Encryption Scheme (ECDH + SHA-256 + AES-256-GCM)."""

from .crypto import (
    EciesError,
    InvalidKeyError,
    MalformedMessageError,
    AuthenticationFailedError,
    InvalidKeyLengthError,
    InvalidParameterLengthError,
    KeyPair,
    WireMessage,
    ecies_encrypt,
    ecies_decrypt,
    encrypt_text,
    decrypt_text,
)

__version__ = "0.1.0"

__all__ = [
    "EciesError",
    "InvalidKeyError",
    "MalformedMessageError",
    "AuthenticationFailedError",
    "InvalidKeyLengthError",
    "InvalidParameterLengthError",
    "KeyPair",
    "WireMessage",
    "ecies_encrypt",
    "ecies_decrypt",
    "encrypt_text",
    "decrypt_text",
]
