# file: module2_token_codec/__init__.py
"""
Module 2: Signed Token Codec

Passphrase-keyed, tamper-evident text tokens built on the Module 1 primitives.

Public API:
    - TokenCodec(passphrase, config=None).encrypt(text) -> str
    - TokenCodec(passphrase, config=None).decrypt(token) -> str
    - TokenCodec.combine(a, b) -> bytes
    - load_config(path=None) -> dict
"""

from .codec import TokenCodec
from .config import load_config, get_default_config, validate_config
from .framing import assemble_token, parse_token, LENGTH_PREFIX_SIZE, MAX_DIGEST_SIZE
from src.module1_primitives.crypto_errors import (
    CryptoErrorKind,
    CryptoError,
    CryptoConfigurationError,
    InvalidKeySizeError,
    InvalidArgumentError,
    EncryptionError,
    DecryptionError,
    TamperedInputError,
)

__version__ = "1.0.0"

__all__ = [
    "TokenCodec",
    "load_config",
    "get_default_config",
    "validate_config",
    "assemble_token",
    "parse_token",
    "LENGTH_PREFIX_SIZE",
    "MAX_DIGEST_SIZE",
    "CryptoErrorKind",
    "CryptoError",
    "CryptoConfigurationError",
    "InvalidKeySizeError",
    "InvalidArgumentError",
    "EncryptionError",
    "DecryptionError",
    "TamperedInputError",
]
