"""Exceptions raised by the ECIES primitives."""


class EciesError(Exception):
    """Base exception for ECIES errors."""
    pass


class InvalidKeyError(EciesError):
    """Key is malformed, of an unsupported kind, or on a different curve than its peer."""
    pass


class MalformedMessageError(EciesError):
    """Wire message cannot be parsed."""
    pass


class AuthenticationFailedError(EciesError):
    """
    AEAD tag verification failed.

    Raised for tampered ciphertext and for a wrong key alike. The two
    causes are deliberately indistinguishable.
    """
    pass


class InvalidKeyLengthError(EciesError, ValueError):
    """Symmetric key is not the size the cipher requires."""
    pass


class InvalidParameterLengthError(EciesError, ValueError):
    """Salt, nonce, tag or shared secret has the wrong size."""
    pass
