#!/usr/bin/env python3
"""
Generate cross-platform ECIES test vectors.
Python is the source of truth.

Usage:
    python scripts/generate_test_vectors.py [output.json]

Default output: tests/fixtures/ecies_test_vectors.json
"""
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from ecies.config import settings
from ecies.crypto import agree, derive_key, ecies_decrypt, ecies_encrypt, encrypt_aes_gcm
from tests.utils.crypto_test_utils import (
    RFC7748_ALICE_PRIVATE,
    RFC7748_ALICE_PUBLIC,
    RFC7748_BOB_PRIVATE,
    RFC7748_BOB_PUBLIC,
    DeterministicRandom,
    zero_random_bytes,
)

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = project_dir / "tests" / "fixtures" / "ecies_test_vectors.json"


def build_vectors() -> dict:
    vectors = {
        "version": "1.0",
        "description": "ECIES test vectors: X25519 + SHA-256(secret || salt) + AES-256-GCM",
        "wire_format": "salt(16) | nonce(12) | auth_tag(16) | ciphertext",
        "ecdh": [],
        "kdf": [],
        "aes_gcm": [],
        "ecies": [],
    }

    # ECDH vectors (RFC 7748 test keys)
    shared_secret = agree(RFC7748_ALICE_PRIVATE, RFC7748_BOB_PUBLIC)
    vectors["ecdh"].append({
        "description": "RFC 7748 section 6.1",
        "private_key_hex": RFC7748_ALICE_PRIVATE.hex(),
        "public_key_hex": RFC7748_BOB_PUBLIC.hex(),
        "expected_shared_secret_hex": shared_secret.hex(),
    })

    # KDF vectors
    for description, salt in (("Zero salt", bytes(16)), ("0xbb salt", b"\xbb" * 16)):
        vectors["kdf"].append({
            "description": description,
            "shared_secret_hex": shared_secret.hex(),
            "salt_hex": salt.hex(),
            "expected_key_hex": derive_key(shared_secret, salt).hex(),
        })

    # AES-GCM vectors
    aes_key = bytes(32)
    for description, plaintext in (("Empty plaintext", b""), ("Simple encryption", b"Hello, World!")):
        nonce, ciphertext, auth_tag = encrypt_aes_gcm(aes_key, plaintext, zero_random_bytes)
        vectors["aes_gcm"].append({
            "description": description,
            "key_hex": aes_key.hex(),
            "nonce_hex": nonce.hex(),
            "plaintext_hex": plaintext.hex(),
            "ciphertext_hex": ciphertext.hex(),
            "auth_tag_hex": auth_tag.hex(),
        })

    # End-to-end ECIES vectors
    cases = (
        ("Hello world, zero salt and nonce", b"Hello world", zero_random_bytes),
        ("Empty plaintext, seeded randomness", b"", DeterministicRandom(b"empty")),
        ("Longer message, seeded randomness", b"This is a longer message for testing ECIES framing.", DeterministicRandom(b"long")),
    )
    for description, plaintext, random_bytes in cases:
        wire = ecies_encrypt(RFC7748_ALICE_PRIVATE, RFC7748_BOB_PUBLIC, plaintext, random_bytes)

        # Every vector must decrypt on the recipient side before it is published
        if ecies_decrypt(RFC7748_BOB_PRIVATE, RFC7748_ALICE_PUBLIC, wire) != plaintext:
            raise RuntimeError(f"Vector does not round-trip: {description}")

        vectors["ecies"].append({
            "description": description,
            "sender_private_key_hex": RFC7748_ALICE_PRIVATE.hex(),
            "sender_public_key_hex": RFC7748_ALICE_PUBLIC.hex(),
            "recipient_private_key_hex": RFC7748_BOB_PRIVATE.hex(),
            "recipient_public_key_hex": RFC7748_BOB_PUBLIC.hex(),
            "plaintext_hex": plaintext.hex(),
            "wire_message_hex": wire.hex(),
        })

    return vectors


def write_vectors(output: Path = DEFAULT_OUTPUT) -> Path:
    vectors = build_vectors()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(vectors, indent=2))
    logger.info(
        "Generated %d ECIES vectors: %s",
        len(vectors["ecies"]),
        output,
    )
    return output


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
    write_vectors(Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT)
