"""
Tests for AES-256-GCM encryption/decryption.

These tests verify:
- Round-trip and field sizes
- Fresh nonce per call
- Tag verification before any plaintext is returned
- Length checks on key, nonce and tag
"""
import pytest

from ecies.crypto import (
    AuthenticationFailedError,
    InvalidKeyLengthError,
    InvalidParameterLengthError,
    decrypt_aes_gcm,
    encrypt_aes_gcm,
)
from ecies.crypto.random import default_random_bytes
from tests.utils.crypto_test_utils import DeterministicRandom, zero_random_bytes


class TestAESGCM:
    """Tests for AES-256-GCM encryption/decryption."""

    @pytest.fixture
    def key(self):
        return default_random_bytes(32)

    def test_encrypt_decrypt_roundtrip(self, key):
        """Encrypted data can be decrypted."""
        plaintext = b"Hello, World!"
        nonce, ciphertext, tag = encrypt_aes_gcm(key, plaintext)
        assert decrypt_aes_gcm(key, nonce, ciphertext, tag) == plaintext

    def test_empty_plaintext_roundtrip(self, key):
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"")
        assert ciphertext == b""
        assert decrypt_aes_gcm(key, nonce, ciphertext, tag) == b""

    def test_encrypt_produces_different_nonce_each_time(self, key):
        """Each encryption uses a unique nonce."""
        nonces = {encrypt_aes_gcm(key, b"test")[0] for _ in range(100)}
        assert len(nonces) == 100

    def test_ciphertext_length_matches_plaintext(self, key):
        """Ciphertext is same length as plaintext (tag is separate)."""
        plaintext = b"x" * 100
        _, ciphertext, _ = encrypt_aes_gcm(key, plaintext)
        assert len(ciphertext) == len(plaintext)

    def test_nonce_is_12_bytes(self, key):
        nonce, _, _ = encrypt_aes_gcm(key, b"test")
        assert len(nonce) == 12

    def test_tag_is_16_bytes(self, key):
        _, _, tag = encrypt_aes_gcm(key, b"test")
        assert len(tag) == 16

    def test_nonce_drawn_from_supplied_source(self, key):
        rng = DeterministicRandom()
        nonce, _, _ = encrypt_aes_gcm(key, b"test", rng)
        assert rng.requests == [12]
        assert nonce == DeterministicRandom()(12)

    def test_wrong_key_fails(self, key):
        """Decryption with wrong key fails."""
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"secret")
        with pytest.raises(AuthenticationFailedError):
            decrypt_aes_gcm(default_random_bytes(32), nonce, ciphertext, tag)

    def test_tampered_ciphertext_fails(self, key):
        """Tampered ciphertext fails authentication."""
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"secret")
        tampered = bytes([ciphertext[0] ^ 1]) + ciphertext[1:]
        with pytest.raises(AuthenticationFailedError):
            decrypt_aes_gcm(key, nonce, tampered, tag)

    def test_tampered_tag_fails(self, key):
        """Tampered auth tag fails authentication."""
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"secret")
        tampered_tag = bytes([tag[0] ^ 1]) + tag[1:]
        with pytest.raises(AuthenticationFailedError):
            decrypt_aes_gcm(key, nonce, ciphertext, tampered_tag)

    def test_tampered_nonce_fails(self, key):
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"secret")
        tampered_nonce = nonce[:-1] + bytes([nonce[-1] ^ 0x80])
        with pytest.raises(AuthenticationFailedError):
            decrypt_aes_gcm(key, tampered_nonce, ciphertext, tag)

    def test_failure_message_does_not_reveal_cause(self, key):
        """Wrong key and tampering produce the same error message."""
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"secret")

        with pytest.raises(AuthenticationFailedError) as wrong_key:
            decrypt_aes_gcm(default_random_bytes(32), nonce, ciphertext, tag)
        with pytest.raises(AuthenticationFailedError) as tampered:
            decrypt_aes_gcm(key, nonce, bytes([ciphertext[0] ^ 1]) + ciphertext[1:], tag)

        assert str(wrong_key.value) == str(tampered.value)
        assert wrong_key.value.__cause__ is None
        assert wrong_key.value.__suppress_context__

    def test_associated_data_authenticated(self, key):
        """AAD is authenticated but not encrypted."""
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"message", associated_data=b"metadata")
        assert decrypt_aes_gcm(key, nonce, ciphertext, tag, b"metadata") == b"message"

    def test_wrong_aad_fails(self, key):
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"message", associated_data=b"metadata")
        with pytest.raises(AuthenticationFailedError):
            decrypt_aes_gcm(key, nonce, ciphertext, tag, b"wrong")

    def test_missing_aad_fails(self, key):
        nonce, ciphertext, tag = encrypt_aes_gcm(key, b"message", associated_data=b"metadata")
        with pytest.raises(AuthenticationFailedError):
            decrypt_aes_gcm(key, nonce, ciphertext, tag, None)

    def test_encrypt_rejects_wrong_key_length(self):
        """Key must be exactly 32 bytes."""
        with pytest.raises(InvalidKeyLengthError, match="Key must be 32 bytes"):
            encrypt_aes_gcm(b'\x00' * 16, b"test")

    def test_decrypt_rejects_wrong_key_length(self):
        with pytest.raises(InvalidKeyLengthError, match="Key must be 32 bytes"):
            decrypt_aes_gcm(b'\x00' * 24, b'\x00' * 12, b"test", b'\x00' * 16)

    def test_decrypt_rejects_wrong_nonce_length(self, key):
        with pytest.raises(InvalidParameterLengthError, match="Nonce must be 12 bytes"):
            decrypt_aes_gcm(key, b'\x00' * 16, b"test", b'\x00' * 16)

    def test_decrypt_rejects_wrong_tag_length(self, key):
        with pytest.raises(InvalidParameterLengthError, match="Auth tag must be 16 bytes"):
            decrypt_aes_gcm(key, b'\x00' * 12, b"test", b'\x00' * 15)


class TestGCMVectors:
    """Known-answer tests: McGrew & Viega GCM test cases 13 and 14."""

    KEY = bytes(32)

    def test_case_13_empty_plaintext(self):
        nonce, ciphertext, tag = encrypt_aes_gcm(self.KEY, b"", zero_random_bytes)
        assert nonce == bytes(12)
        assert ciphertext == b""
        assert tag == bytes.fromhex("530f8afbc74536b9a963b4f1c4cb738b")

    def test_case_14_zero_block(self):
        nonce, ciphertext, tag = encrypt_aes_gcm(self.KEY, bytes(16), zero_random_bytes)
        assert ciphertext == bytes.fromhex("cea7403d4d606b6e074ec5d3baf39d18")
        assert tag == bytes.fromhex("d0d1c8a799996bf0265b98b5d48ab919")

    def test_case_14_decrypts(self):
        plaintext = decrypt_aes_gcm(
            self.KEY,
            bytes(12),
            bytes.fromhex("cea7403d4d606b6e074ec5d3baf39d18"),
            bytes.fromhex("d0d1c8a799996bf0265b98b5d48ab919"),
        )
        assert plaintext == bytes(16)
