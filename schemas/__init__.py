"""Pydantic schemas for hex/JSON transport of encrypted messages."""

from .encryption import EncryptedMessage, validate_hex_string

__all__ = [
    "EncryptedMessage",
    "validate_hex_string",
]
