# file: module1_primitives/symmetric.py
"""
Symmetric cipher capability using a block cipher in CBC mode.

The IV is generated randomly for every encryption and prepended to the
resulting ciphertext; decryption reads it back from the same position.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Callable, Dict, FrozenSet, Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm, Cipher, algorithms, modes

from .crypto_errors import (
    CryptoConfigurationError,
    DecryptionError,
    InvalidArgumentError,
    InvalidKeySizeError,
)

logger = logging.getLogger(__name__)


DEFAULT_CIPHER = "aes"

# Name -> (algorithm class, accepted key lengths in bytes)
_ALGORITHMS: Dict[str, Tuple[Callable[[bytes], BlockCipherAlgorithm], FrozenSet[int]]] = {
    "aes": (algorithms.AES, frozenset({16, 24, 32})),
}


def supported_ciphers():
    """Names accepted by SymmetricAlgorithmProvider."""
    return sorted(_ALGORITHMS)


class CipherProvider(ABC):
    """
    Encrypts and decrypts buffers under a fixed key.

    ``encrypt`` returns ``IV || ciphertext`` with a fresh IV per call and
    ``decrypt`` accepts the same layout.
    """

    @property
    @abstractmethod
    def iv_size(self) -> int:
        """Length in bytes of the IV prefix."""

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt ``plaintext`` and return ``IV || ciphertext``."""

    @abstractmethod
    def decrypt(self, framed: bytes) -> bytes:
        """Split the IV off ``framed``, decrypt the rest and return the plaintext."""


class SymmetricAlgorithmProvider(CipherProvider):
    """
    CBC-mode block cipher with PKCS#7 padding.

    Parameters:
        key (bytes): Cipher key; its length must be one the algorithm accepts
        algorithm (str): One of ``supported_ciphers()``; defaults to AES

    Invariants:
        - iv_size == block_size
        - The key is fixed for the lifetime of the instance
        - Every call builds its own cipher context (reentrant)
    """

    def __init__(self, key: bytes, algorithm: str = DEFAULT_CIPHER):
        name = str(algorithm).lower()
        if name not in _ALGORITHMS:
            raise CryptoConfigurationError(
                f"Unsupported cipher algorithm '{algorithm}' "
                f"(supported: {', '.join(supported_ciphers())})"
            )
        if not isinstance(key, (bytes, bytearray)):
            raise InvalidArgumentError(f"key must be bytes, got {type(key).__name__}")

        algorithm_class, key_sizes = _ALGORITHMS[name]
        if len(key) not in key_sizes:
            raise InvalidKeySizeError(
                f"{name} requires a key of {sorted(key_sizes)} bytes, got {len(key)}",
                key_size=len(key),
                allowed_sizes=key_sizes,
            )

        self.name = name
        self._key = bytes(key)
        self._algorithm_class = algorithm_class
        self.block_size = algorithm_class.block_size // 8

        logger.debug(f"Cipher provider: {self.name}-cbc, {len(self._key) * 8}-bit key")

    @property
    def iv_size(self) -> int:
        return self.block_size

    def _cipher(self, iv: bytes) -> Cipher:
        return Cipher(self._algorithm_class(self._key), modes.CBC(iv))

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Encrypt a plaintext value.

        Args:
            plaintext: Non-empty data to encrypt

        Returns:
            ``IV || ciphertext`` where the IV is ``iv_size`` random bytes

        Raises:
            InvalidArgumentError: If plaintext is None, empty or not bytes
        """
        self._validate_buffer("plaintext", plaintext)

        iv = os.urandom(self.iv_size)

        padder = padding.PKCS7(self.block_size * 8).padder()
        padded = padder.update(bytes(plaintext)) + padder.finalize()

        encryptor = self._cipher(iv).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()

        return iv + ciphertext

    def decrypt(self, framed: bytes) -> bytes:
        """
        Decrypt ``IV || ciphertext``.

        Raises:
            InvalidArgumentError: If framed is None, empty or not bytes
            DecryptionError: If the IV or ciphertext is short, the ciphertext
                is not block aligned, or the padding is invalid
        """
        self._validate_buffer("framed", framed)

        framed = bytes(framed)
        iv, ciphertext = framed[:self.iv_size], framed[self.iv_size:]

        if len(iv) < self.iv_size or not ciphertext:
            raise DecryptionError(
                f"Ciphertext too short: {len(framed)} bytes (minimum {self.iv_size + self.block_size})"
            )
        if len(ciphertext) % self.block_size != 0:
            raise DecryptionError(
                f"Ciphertext length {len(ciphertext)} is not a multiple of the block size {self.block_size}"
            )

        decryptor = self._cipher(iv).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(self.block_size * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            raise DecryptionError("Invalid padding") from e

    @staticmethod
    def _validate_buffer(name: str, value) -> None:
        if value is None:
            raise InvalidArgumentError(f"{name} must not be None")
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(f"{name} must be bytes-like, got {type(value).__name__}")
        if len(value) == 0:
            raise InvalidArgumentError(f"{name} must not be empty")

    def __repr__(self) -> str:
        # key material intentionally omitted
        return f"SymmetricAlgorithmProvider(algorithm={self.name!r}, key_bits={len(self._key) * 8})"
