# file: module1_primitives/__init__.py
"""
Module 1: Cryptographic Primitives

Capability interfaces consumed by the token codec (Module 2) and their
``cryptography``-backed implementations.

Public API:
    - DigestProvider / HashAlgorithmProvider: digest(buffer) -> bytes
    - CipherProvider / SymmetricAlgorithmProvider: encrypt/decrypt with IV prefix
    - combine_bytes(a, b) -> bytes
    - compare_bytes(a, b) -> bool (constant time)
"""

from .byte_utils import combine_bytes, compare_bytes
from .digest import DigestProvider, HashAlgorithmProvider, supported_digests, DEFAULT_DIGEST
from .symmetric import CipherProvider, SymmetricAlgorithmProvider, supported_ciphers, DEFAULT_CIPHER
from .crypto_errors import (
    CryptoErrorKind,
    CryptoError,
    CryptoConfigurationError,
    InvalidKeySizeError,
    InvalidArgumentError,
    EncryptionError,
    DecryptionError,
    TamperedInputError,
    TruncatedTokenError,
    MalformedTokenError,
)

__version__ = "1.0.0"

__all__ = [
    "combine_bytes",
    "compare_bytes",
    "DigestProvider",
    "HashAlgorithmProvider",
    "supported_digests",
    "DEFAULT_DIGEST",
    "CipherProvider",
    "SymmetricAlgorithmProvider",
    "supported_ciphers",
    "DEFAULT_CIPHER",
    "CryptoErrorKind",
    "CryptoError",
    "CryptoConfigurationError",
    "InvalidKeySizeError",
    "InvalidArgumentError",
    "EncryptionError",
    "DecryptionError",
    "TamperedInputError",
    "TruncatedTokenError",
    "MalformedTokenError",
]
