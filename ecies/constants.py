"""
Wire-format and key-size constants.

These sizes are part of the wire format shared with every existing
encrypted message. They are constants, not settings.
"""

# WireMessage = salt (16) | nonce (12) | auth_tag (16) | ciphertext (variable)
SALT_SIZE = 16
NONCE_SIZE = 12
AUTH_TAG_SIZE = 16

SALT_OFFSET = 0
NONCE_OFFSET = SALT_OFFSET + SALT_SIZE
AUTH_TAG_OFFSET = NONCE_OFFSET + NONCE_SIZE
CIPHERTEXT_OFFSET = AUTH_TAG_OFFSET + AUTH_TAG_SIZE

# Smallest valid wire message (empty plaintext)
HEADER_SIZE = CIPHERTEXT_OFFSET

# AES-256 key, equal to the SHA-256 digest length
SYMMETRIC_KEY_SIZE = 32

# Raw X25519 scalars and points
X25519_KEY_SIZE = 32

SUPPORTED_CURVES = ("x25519", "secp256r1", "secp384r1", "secp521r1")
