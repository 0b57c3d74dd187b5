# file: module1_primitives/digest.py
"""
Digest capability and its hash-algorithm-backed implementation.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict

from cryptography.hazmat.primitives import hashes

from .crypto_errors import CryptoConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)


DEFAULT_DIGEST = "sha3_256"

# Name -> factory returning a fresh HashAlgorithm instance
_ALGORITHMS: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha3_256": hashes.SHA3_256,
    "sha3_512": hashes.SHA3_512,
    "blake2b": lambda: hashes.BLAKE2b(64),
    "blake2s": lambda: hashes.BLAKE2s(32),
}


def supported_digests():
    """Names accepted by HashAlgorithmProvider."""
    return sorted(_ALGORITHMS)


class DigestProvider(ABC):
    """
    Computes a fixed-size digest of a buffer.

    Implementations must be deterministic and keep no state between calls.
    """

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Length in bytes of every digest this provider returns."""

    @abstractmethod
    def digest(self, buffer: bytes) -> bytes:
        """Return the digest of ``buffer`` (empty buffers are valid)."""


class HashAlgorithmProvider(DigestProvider):
    """
    Digest provider backed by a ``cryptography`` hash algorithm.

    A new hash context is created for every call, so one instance can be
    shared between threads.

    Parameters:
        algorithm (str): One of ``supported_digests()``; defaults to SHA3-256
    """

    def __init__(self, algorithm: str = DEFAULT_DIGEST):
        name = str(algorithm).lower().replace("-", "_")
        if name not in _ALGORITHMS:
            raise CryptoConfigurationError(
                f"Unsupported digest algorithm '{algorithm}' "
                f"(supported: {', '.join(supported_digests())})"
            )

        self.name = name
        self._factory = _ALGORITHMS[name]
        self._digest_size = self._factory().digest_size

        logger.debug(f"Digest provider: {self.name} ({self._digest_size} bytes)")

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def digest(self, buffer: bytes) -> bytes:
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(f"buffer must be bytes-like, got {type(buffer).__name__}")

        context = hashes.Hash(self._factory())
        context.update(bytes(buffer))
        return context.finalize()

    def __repr__(self) -> str:
        return f"HashAlgorithmProvider(algorithm={self.name!r})"
