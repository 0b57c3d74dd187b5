# file: module1_primitives/byte_utils.py
"""
Byte buffer helpers: ordered concatenation and constant-time equality.
"""

import hmac

from .crypto_errors import InvalidArgumentError


_BUFFER_TYPES = (bytes, bytearray, memoryview)


def _check_buffer(name: str, value) -> None:
    if not isinstance(value, _BUFFER_TYPES):
        raise InvalidArgumentError(f"{name} must be bytes-like, got {type(value).__name__}")


def combine_bytes(buffer1: bytes, buffer2: bytes) -> bytes:
    """
    Concatenate two buffers.

    Args:
        buffer1: Leading bytes
        buffer2: Trailing bytes

    Returns:
        ``buffer1`` immediately followed by ``buffer2``; the result is exactly
        ``len(buffer1) + len(buffer2)`` bytes long.

    Raises:
        InvalidArgumentError: If either argument is not bytes-like
    """
    _check_buffer("buffer1", buffer1)
    _check_buffer("buffer2", buffer2)

    return bytes(buffer1) + bytes(buffer2)


def compare_bytes(array1: bytes, array2: bytes) -> bool:
    """
    Compare two buffers for equality in constant time.

    Returns False when the lengths differ and True iff every byte matches.
    Running time does not depend on where the first mismatch occurs.

    Raises:
        InvalidArgumentError: If either argument is not bytes-like
    """
    _check_buffer("array1", array1)
    _check_buffer("array2", array2)

    return hmac.compare_digest(bytes(array1), bytes(array2))
