# file: module2_token_codec/testing_utils.py
"""
Testing utilities for the token codec.

Provides bit flipping and token tampering for robustness testing.
Used only in test/evaluation contexts.
"""

import base64
from typing import Optional


def flip_bit(data: bytes, bit_index: int) -> bytes:
    """
    Flip a single bit of ``data``.

    Args:
        data: Original data
        bit_index: Bit position, counted from the most significant bit of
                   byte 0; negative indices count from the end

    Returns:
        Copy of data with one bit inverted
    """
    total_bits = len(data) * 8
    if not -total_bits <= bit_index < total_bits:
        raise IndexError(f"bit_index {bit_index} out of range for {total_bits} bits")

    bit_index %= total_bits
    corrupted = bytearray(data)
    corrupted[bit_index // 8] ^= 0x80 >> (bit_index % 8)

    return bytes(corrupted)


def tamper_token(token: str, byte_index: int = -1, bit: int = 0) -> str:
    """
    Decode a base64 token, flip one bit of one byte and re-encode it.

    Example:
        >>> tampered = tamper_token(codec.encrypt("hello world"))
        >>> codec.decrypt(tampered)  # raises TamperedInputError
    """
    payload = base64.b64decode(token)
    byte_index %= len(payload)

    return base64.b64encode(flip_bit(payload, byte_index * 8 + bit)).decode("ascii")


def replace_region(
    token: str,
    start: int,
    replacement: bytes,
    end: Optional[int] = None
) -> str:
    """
    Overwrite ``payload[start:end]`` of a decoded token with ``replacement``.

    ``end`` defaults to ``start + len(replacement)``.
    """
    payload = base64.b64decode(token)
    if end is None:
        end = start + len(replacement)

    return base64.b64encode(payload[:start] + replacement + payload[end:]).decode("ascii")
