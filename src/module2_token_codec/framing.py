# file: module2_token_codec/framing.py
"""
Token assembly and parsing.
"""

from typing import Tuple

from src.module1_primitives.crypto_errors import MalformedTokenError, TruncatedTokenError


LENGTH_PREFIX_SIZE = 1
MAX_DIGEST_SIZE = 255


def assemble_token(tag: bytes, framed: bytes) -> bytes:
    """
    Assemble a signed token from its components.

    Token structure (1 + D + N bytes):
        [digest_length:1][digest:D][iv || ciphertext:N]

    Args:
        tag: Integrity digest over ``key || framed``
        framed: ``IV || ciphertext`` as produced by the cipher provider

    Returns:
        Raw token bytes, ready for base64 encoding

    Raises:
        MalformedTokenError: If the digest is longer than 255 bytes or framed is empty
    """
    if len(tag) > MAX_DIGEST_SIZE:
        raise MalformedTokenError(
            f"Digest too long: {len(tag)} bytes (maximum {MAX_DIGEST_SIZE})"
        )
    if not framed:
        raise MalformedTokenError("Token payload is empty")

    return bytes([len(tag)]) + bytes(tag) + bytes(framed)


def parse_token(payload: bytes) -> Tuple[bytes, bytes]:
    """
    Parse raw token bytes into components.

    Args:
        payload: Base64-decoded token

    Returns:
        Tuple of (tag, framed)

    Raises:
        TruncatedTokenError: If the payload is empty, the declared digest
            length exceeds the remaining bytes, or nothing follows the digest
    """
    if len(payload) < LENGTH_PREFIX_SIZE:
        raise TruncatedTokenError("Token is empty")

    tag_length = payload[0]
    tag_end = LENGTH_PREFIX_SIZE + tag_length

    if len(payload) <= tag_end:
        raise TruncatedTokenError(
            f"Token too short: {len(payload)} bytes for declared digest of {tag_length} bytes"
        )

    tag = payload[LENGTH_PREFIX_SIZE:tag_end]
    framed = payload[tag_end:]

    return tag, framed
