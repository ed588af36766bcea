"""ECIES primitives: key agreement, key derivation, AES-GCM and wire framing."""

from .errors import (
    EciesError,
    InvalidKeyError,
    MalformedMessageError,
    AuthenticationFailedError,
    InvalidKeyLengthError,
    InvalidParameterLengthError,
)
from .random import RandomSource, default_random_bytes
from .key_agreement import KeyPair, agree
from .kdf import derive_key, generate_salt
from .aead import encrypt_aes_gcm, decrypt_aes_gcm
from .codec import WireMessage, frame_message, parse_message
from .scheme import ecies_encrypt, ecies_decrypt, encrypt_text, decrypt_text

__all__ = [
    "EciesError",
    "InvalidKeyError",
    "MalformedMessageError",
    "AuthenticationFailedError",
    "InvalidKeyLengthError",
    "InvalidParameterLengthError",
    "RandomSource",
    "default_random_bytes",
    "KeyPair",
    "agree",
    "derive_key",
    "generate_salt",
    "encrypt_aes_gcm",
    "decrypt_aes_gcm",
    "WireMessage",
    "frame_message",
    "parse_message",
    "ecies_encrypt",
    "ecies_decrypt",
    "encrypt_text",
    "decrypt_text",
]
