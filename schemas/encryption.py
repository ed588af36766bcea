"""
Pydantic schema for carrying ECIES wire messages over text channels (JSON).

All fields are hex-encoded strings. The bytes form produced by to_wire() is
the bit-exact wire format; this schema only changes the encoding.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ecies.constants import AUTH_TAG_SIZE, NONCE_SIZE, SALT_SIZE
from ecies.crypto import WireMessage, parse_message


def validate_hex_string(value: str, expected_length: Optional[int] = None) -> str:
    """Validate that a string is valid hex and optionally check length."""
    try:
        bytes.fromhex(value)
    except ValueError:
        raise ValueError("Must be a valid hex string")

    if expected_length is not None and len(value) != expected_length:
        raise ValueError(f"Must be {expected_length} hex characters")

    return value.lower()


class EncryptedMessage(BaseModel):
    """
    Hex-encoded ECIES wire message.

    Field order matches the wire format: salt | nonce | auth_tag | ciphertext.
    """

    salt: str = Field(
        ..., min_length=SALT_SIZE * 2, max_length=SALT_SIZE * 2, description="KDF salt (16 bytes hex)"
    )
    nonce: str = Field(
        ..., min_length=NONCE_SIZE * 2, max_length=NONCE_SIZE * 2, description="AES-GCM nonce (12 bytes hex)"
    )
    auth_tag: str = Field(
        ..., min_length=AUTH_TAG_SIZE * 2, max_length=AUTH_TAG_SIZE * 2, description="AES-GCM authentication tag (16 bytes hex)"
    )
    ciphertext: str = Field("", description="Encrypted content (variable length hex, empty for empty plaintext)")

    @field_validator("salt")
    @classmethod
    def validate_salt(cls, v: str) -> str:
        return validate_hex_string(v, SALT_SIZE * 2)

    @field_validator("nonce")
    @classmethod
    def validate_nonce(cls, v: str) -> str:
        return validate_hex_string(v, NONCE_SIZE * 2)

    @field_validator("auth_tag")
    @classmethod
    def validate_auth_tag(cls, v: str) -> str:
        return validate_hex_string(v, AUTH_TAG_SIZE * 2)

    @field_validator("ciphertext")
    @classmethod
    def validate_ciphertext(cls, v: str) -> str:
        return validate_hex_string(v)

    def to_wire_message(self) -> WireMessage:
        """Convert to the bytes-based WireMessage."""
        return WireMessage(
            salt=bytes.fromhex(self.salt),
            nonce=bytes.fromhex(self.nonce),
            auth_tag=bytes.fromhex(self.auth_tag),
            ciphertext=bytes.fromhex(self.ciphertext),
        )

    def to_wire(self) -> bytes:
        """Convert to wire-format bytes, ready for ecies_decrypt."""
        return self.to_wire_message().to_bytes()

    @classmethod
    def from_wire(cls, data: bytes) -> "EncryptedMessage":
        """
        Build from wire-format bytes as returned by ecies_encrypt.

        Raises:
            MalformedMessageError: If data is shorter than the 44-byte header
        """
        message = parse_message(data)
        return cls(
            salt=message.salt.hex(),
            nonce=message.nonce.hex(),
            auth_tag=message.auth_tag.hex(),
            ciphertext=message.ciphertext.hex(),
        )
