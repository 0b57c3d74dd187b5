# file: module1_primitives/crypto_errors.py
"""
Cryptographic error types shared by the primitives and the token codec.

Every exception carries a ``kind`` drawn from the closed CryptoErrorKind set,
so callers can branch on the failure category without matching classes.
"""

from enum import Enum


class CryptoErrorKind(str, Enum):
    """Closed set of failure categories visible to callers."""

    CONFIGURATION = "configuration"
    INVALID_KEY_SIZE = "invalid_key_size"
    INVALID_ARGUMENT = "invalid_argument"
    ENCRYPTION_FAILURE = "encryption_failure"
    DECRYPTION_FAILURE = "decryption_failure"
    TAMPERED_INPUT = "tampered_input"


class CryptoError(Exception):
    """Base exception for all token crypto operations."""

    kind = None


class CryptoConfigurationError(CryptoError):
    """Raised when an algorithm name or configuration value is not supported."""

    kind = CryptoErrorKind.CONFIGURATION


class InvalidKeySizeError(CryptoError):
    """Raised when a key does not have a length the cipher accepts."""

    kind = CryptoErrorKind.INVALID_KEY_SIZE

    def __init__(self, message: str, key_size: int = None, allowed_sizes=None):
        super().__init__(message)
        self.key_size = key_size
        self.allowed_sizes = tuple(sorted(allowed_sizes)) if allowed_sizes else ()


class InvalidArgumentError(CryptoError):
    """Raised when a buffer argument is missing, empty or of the wrong type."""

    kind = CryptoErrorKind.INVALID_ARGUMENT


class EncryptionError(CryptoError):
    """Raised when any step of the encrypt path fails."""

    kind = CryptoErrorKind.ENCRYPTION_FAILURE


class DecryptionError(CryptoError):
    """Raised when any step of the decrypt path fails."""

    kind = CryptoErrorKind.DECRYPTION_FAILURE


class TamperedInputError(DecryptionError):
    """Raised when the integrity digest of a token does not match."""

    kind = CryptoErrorKind.TAMPERED_INPUT


class TruncatedTokenError(DecryptionError):
    """Raised when token data is too short for its declared layout."""
    pass


class MalformedTokenError(DecryptionError):
    """Raised when token fields cannot be laid out in the token format."""
    pass
