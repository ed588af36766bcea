"""
Wire message framing.

Format (bit-exact, no version byte, no length prefixes):

    salt (16) | nonce (12) | auth_tag (16) | ciphertext (variable)

Every field except the ciphertext has a fixed size, and the ciphertext is
last, so parsing is slicing at fixed offsets.
"""

from dataclasses import dataclass

from ecies.constants import (
    AUTH_TAG_OFFSET,
    AUTH_TAG_SIZE,
    CIPHERTEXT_OFFSET,
    HEADER_SIZE,
    NONCE_OFFSET,
    NONCE_SIZE,
    SALT_OFFSET,
    SALT_SIZE,
)
from ecies.crypto.errors import InvalidParameterLengthError, MalformedMessageError


@dataclass(frozen=True)
class WireMessage:
    """
    Decomposed wire message.

    Attributes:
        salt: KDF salt (16 bytes)
        nonce: AES-GCM nonce (12 bytes)
        auth_tag: AES-GCM authentication tag (16 bytes)
        ciphertext: Encrypted data (variable length, may be empty)
    """

    salt: bytes  # 16 bytes
    nonce: bytes  # 12 bytes
    auth_tag: bytes  # 16 bytes
    ciphertext: bytes  # variable

    def __post_init__(self):
        if len(self.salt) != SALT_SIZE:
            raise InvalidParameterLengthError(f"Salt must be {SALT_SIZE} bytes")
        if len(self.nonce) != NONCE_SIZE:
            raise InvalidParameterLengthError(f"Nonce must be {NONCE_SIZE} bytes")
        if len(self.auth_tag) != AUTH_TAG_SIZE:
            raise InvalidParameterLengthError(f"Auth tag must be {AUTH_TAG_SIZE} bytes")

    def to_bytes(self) -> bytes:
        """Serialize to the wire format."""
        return frame_message(self.salt, self.nonce, self.auth_tag, self.ciphertext)

    @classmethod
    def from_bytes(cls, data: bytes) -> "WireMessage":
        """Deserialize from the wire format."""
        return parse_message(data)

    def to_hex(self) -> str:
        """Serialize to hex string."""
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> "WireMessage":
        """Deserialize from hex string."""
        try:
            data = bytes.fromhex(hex_str)
        except (ValueError, TypeError):
            raise MalformedMessageError("Wire message is not valid hex") from None
        return cls.from_bytes(data)

    def __len__(self) -> int:
        return HEADER_SIZE + len(self.ciphertext)


def frame_message(salt: bytes, nonce: bytes, auth_tag: bytes, ciphertext: bytes) -> bytes:
    """
    Concatenate the message fields in wire order.

    Raises:
        InvalidParameterLengthError: If a fixed-size field has the wrong length
    """
    if len(salt) != SALT_SIZE:
        raise InvalidParameterLengthError(f"Salt must be {SALT_SIZE} bytes")
    if len(nonce) != NONCE_SIZE:
        raise InvalidParameterLengthError(f"Nonce must be {NONCE_SIZE} bytes")
    if len(auth_tag) != AUTH_TAG_SIZE:
        raise InvalidParameterLengthError(f"Auth tag must be {AUTH_TAG_SIZE} bytes")

    return b"".join((bytes(salt), bytes(nonce), bytes(auth_tag), bytes(ciphertext)))


def parse_message(data: bytes) -> WireMessage:
    """
    Split a wire message into its fields.

    Args:
        data: Wire message bytes

    Returns:
        WireMessage with salt, nonce, auth_tag and ciphertext

    Raises:
        MalformedMessageError: If data is shorter than the 44-byte header
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedMessageError(f"Wire message must be bytes, got {type(data).__name__}")

    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise MalformedMessageError(
            f"Wire message must be at least {HEADER_SIZE} bytes, got {len(data)}"
        )

    return WireMessage(
        salt=data[SALT_OFFSET:NONCE_OFFSET],
        nonce=data[NONCE_OFFSET:AUTH_TAG_OFFSET],
        auth_tag=data[AUTH_TAG_OFFSET:CIPHERTEXT_OFFSET],
        ciphertext=data[CIPHERTEXT_OFFSET:],
    )
