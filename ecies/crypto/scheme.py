"""
ECIES encrypt / decrypt.

Encryption (sender):
1. Compute the ECDH shared secret from our private key and the recipient's public key
2. Draw a random 16-byte salt
3. Derive the AES-256 key as SHA-256(shared_secret || salt)
4. Encrypt with AES-256-GCM under a fresh random nonce
5. Frame salt | nonce | auth_tag | ciphertext

Decryption (recipient) parses the frame, recomputes the same shared secret
from the other side of the key agreement, re-derives the key from the
carried salt and verifies/decrypts.

Both sides use static keys: there is no ephemeral key and no forward
secrecy. Errors from any step propagate unchanged to the caller.
"""

import logging
from typing import Any, Optional

from ecies.config import settings
from ecies.crypto.aead import decrypt_aes_gcm, encrypt_aes_gcm
from ecies.crypto.codec import frame_message, parse_message
from ecies.crypto.errors import EciesError, MalformedMessageError
from ecies.crypto.kdf import derive_key, generate_salt
from ecies.crypto.key_agreement import agree
from ecies.crypto.random import RandomSource

logger = logging.getLogger(__name__)


def ecies_encrypt(
    sender_private_key: Any,
    recipient_public_key: Any,
    plaintext: bytes,
    random_bytes: Optional[RandomSource] = None,
) -> bytes:
    """
    Encrypt a message for a recipient's public key.

    Args:
        sender_private_key: Sender's private key handle
        recipient_public_key: Recipient's public key handle
        plaintext: Data to encrypt (may be empty)
        random_bytes: Randomness source for salt and nonce (default: CSPRNG)

    Returns:
        Wire message: salt (16) | nonce (12) | auth_tag (16) | ciphertext

    Raises:
        TypeError: If plaintext is a str (use encrypt_text)
        InvalidKeyError: If the keys cannot be used together

    Example:
        >>> alice = X25519PrivateKey.generate()
        >>> bob = X25519PrivateKey.generate()
        >>> wire = ecies_encrypt(alice, bob.public_key(), b"Hello world")
        >>> len(wire)
        55
        >>> ecies_decrypt(bob, alice.public_key(), wire)
        b'Hello world'
    """
    if isinstance(plaintext, str):
        raise TypeError("Plaintext must be bytes; use encrypt_text for str")

    shared_secret = agree(sender_private_key, recipient_public_key)
    salt = generate_salt(random_bytes)
    symmetric_key = derive_key(shared_secret, salt)

    nonce, ciphertext, auth_tag = encrypt_aes_gcm(symmetric_key, plaintext, random_bytes)
    wire_message = frame_message(salt, nonce, auth_tag, ciphertext)

    logger.debug("Encrypted %d-byte plaintext into %d-byte wire message", len(plaintext), len(wire_message))
    return wire_message


def ecies_decrypt(
    recipient_private_key: Any,
    sender_public_key: Any,
    wire_message: bytes,
) -> bytes:
    """
    Decrypt a wire message produced by ecies_encrypt.

    Args:
        recipient_private_key: Recipient's private key handle
        sender_public_key: Sender's public key handle
        wire_message: Bytes received from the sender

    Returns:
        Decrypted plaintext. Never partial: either the whole message
        authenticates or an error is raised.

    Raises:
        MalformedMessageError: If the message is shorter than 44 bytes
        InvalidKeyError: If the keys cannot be used together
        AuthenticationFailedError: If the message was tampered with or the
            keys do not match the ones used for encryption
    """
    try:
        message = parse_message(wire_message)
        shared_secret = agree(recipient_private_key, sender_public_key)
        symmetric_key = derive_key(shared_secret, message.salt)

        plaintext = decrypt_aes_gcm(
            symmetric_key,
            message.nonce,
            message.ciphertext,
            message.auth_tag,
        )
    except EciesError:
        # Same log line for every cause
        logger.warning("Rejected wire message")
        raise

    logger.debug("Decrypted %d-byte wire message", len(message))
    return plaintext


def encrypt_text(
    sender_private_key: Any,
    recipient_public_key: Any,
    message: str,
    random_bytes: Optional[RandomSource] = None,
) -> bytes:
    """Encrypt a text message, encoded with settings.TEXT_ENCODING."""
    if not isinstance(message, str):
        raise TypeError(f"Message must be str, got {type(message).__name__}")

    return ecies_encrypt(
        sender_private_key,
        recipient_public_key,
        message.encode(settings.TEXT_ENCODING),
        random_bytes,
    )


def decrypt_text(
    recipient_private_key: Any,
    sender_public_key: Any,
    wire_message: bytes,
) -> str:
    """
    Decrypt a wire message produced by encrypt_text.

    Raises:
        MalformedMessageError: If the authenticated plaintext is not valid
            text in settings.TEXT_ENCODING
        (plus everything ecies_decrypt raises)
    """
    plaintext = ecies_decrypt(recipient_private_key, sender_public_key, wire_message)
    try:
        return plaintext.decode(settings.TEXT_ENCODING)
    except UnicodeDecodeError:
        raise MalformedMessageError(
            f"Decrypted message is not valid {settings.TEXT_ENCODING} text"
        ) from None
