# file: module2_token_codec/codec.py
"""
Module 2: Signed Token Codec

Encrypts text into a self-describing, tamper-evident base64 token and
reverses the process.

Token layout before base64:
    [digest_length:1][digest][iv][ciphertext]

The digest is computed over ``key || iv || ciphertext``. This is a plain
keyed-hash construction and not a standard MAC such as HMAC; with the default
SHA3-256 it is not subject to length extension, but md5/sha1/sha2 digests are.
"""

import base64
import binascii
import logging
from typing import Any, Dict, Optional

from src.module1_primitives.byte_utils import combine_bytes, compare_bytes
from src.module1_primitives.crypto_errors import (
    CryptoError,
    DecryptionError,
    EncryptionError,
    InvalidArgumentError,
    InvalidKeySizeError,
    TamperedInputError,
)
from src.module1_primitives.digest import DigestProvider, HashAlgorithmProvider
from src.module1_primitives.symmetric import CipherProvider, SymmetricAlgorithmProvider
from .config import get_default_config, load_config, validate_config
from .framing import assemble_token, parse_token

logger = logging.getLogger(__name__)


_ENCRYPT_FAILED = "encrypt method failed"
_DECRYPT_FAILED = "decrypt method failed"


class TokenCodec:
    """
    Passphrase-keyed encrypt/decrypt of text into signed tokens.

    The key is the UTF-8 encoding of the first ``key_chars`` characters of the
    passphrase (16 by default). Shorter passphrases are rejected.

    All encrypt-path failures surface as EncryptionError. Decrypt-path failures
    surface as DecryptionError, or TamperedInputError when the digest does not
    match; the underlying cause is never chained onto the raised error.

    Instances hold no per-call state and may be shared across threads.

    Example:
        >>> codec = TokenCodec("0123456789ABCDEF")
        >>> token = codec.encrypt("hello world")
        >>> codec.decrypt(token)
        'hello world'
    """

    def __init__(
        self,
        passphrase: str,
        config: Optional[Dict[str, Any]] = None,
        *,
        digest_provider: Optional[DigestProvider] = None,
        cipher_provider: Optional[CipherProvider] = None,
    ):
        """
        Args:
            passphrase: Key seed, at least ``key_chars`` characters long
            config: Configuration dictionary with a 'token' section
                    (defaults to the packaged default_config.yaml)
            digest_provider: Overrides the configured digest algorithm
            cipher_provider: Overrides the configured cipher; must already hold
                             the key derived from ``passphrase``

        Raises:
            InvalidArgumentError: If passphrase is not a string
            InvalidKeySizeError: If passphrase is too short or its key does
                                 not fit the cipher
            CryptoConfigurationError: If the configuration is invalid
        """
        if config is None:
            config = get_default_config()
        token_config = validate_config(config)["token"]

        if not isinstance(passphrase, str):
            raise InvalidArgumentError(f"passphrase must be a string, got {type(passphrase).__name__}")

        key_chars = token_config["key_chars"]
        if len(passphrase) < key_chars:
            raise InvalidKeySizeError(
                f"Passphrase must be at least {key_chars} characters, got {len(passphrase)}",
                key_size=len(passphrase),
                allowed_sizes=[key_chars],
            )

        try:
            self._key = passphrase[:key_chars].encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidArgumentError("passphrase contains characters that cannot be UTF-8 encoded") from None
        self._text_encoding = str(token_config["text_encoding"]).lower()

        self._digest_provider = digest_provider or HashAlgorithmProvider(token_config.get("digest", "sha3_256"))
        self._cipher_provider = cipher_provider or SymmetricAlgorithmProvider(
            self._key, token_config.get("cipher", "aes")
        )

        logger.debug(
            f"TokenCodec ready: digest={self._digest_provider!r}, "
            f"cipher={self._cipher_provider!r}, text_encoding={self._text_encoding}"
        )

    @classmethod
    def from_config_file(cls, passphrase: str, config_path: str) -> "TokenCodec":
        """Build a codec from a YAML configuration file."""
        return cls(passphrase, load_config(config_path))

    @property
    def digest_provider(self) -> DigestProvider:
        return self._digest_provider

    @property
    def cipher_provider(self) -> CipherProvider:
        return self._cipher_provider

    def combine(self, buffer1: bytes, buffer2: bytes) -> bytes:
        """Concatenate two buffers, ``buffer1`` first."""
        return combine_bytes(buffer1, buffer2)

    def encrypt(self, text: str) -> str:
        """
        Encrypt text into a signed base64 token.

        Args:
            text: Non-empty plaintext

        Returns:
            Base64 token string; encrypting the same text twice yields
            different tokens

        Raises:
            EncryptionError: If any step fails (including empty text)
        """
        try:
            if not isinstance(text, str):
                raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")

            framed = self._cipher_provider.encrypt(text.encode(self._text_encoding, "surrogatepass"))
            tag = self._digest_provider.digest(self.combine(self._key, framed))
            token = assemble_token(tag, framed)
        except (CryptoError, ValueError, TypeError) as e:
            logger.debug(f"Encryption failed: {type(e).__name__}")
            raise EncryptionError(_ENCRYPT_FAILED) from None

        return base64.b64encode(token).decode("ascii")

    def decrypt(self, token: str) -> str:
        """
        Verify and decrypt a token produced by ``encrypt``.

        The digest is checked in constant time before any decryption is
        attempted.

        Args:
            token: Base64 token string

        Returns:
            The original plaintext

        Raises:
            TamperedInputError: If the digest does not match the payload
            DecryptionError: If the token is malformed or fails to decrypt
        """
        try:
            if not isinstance(token, str):
                raise InvalidArgumentError(f"token must be a string, got {type(token).__name__}")

            payload = base64.b64decode(token, validate=True)
            tag, framed = parse_token(payload)

            expected_tag = self._digest_provider.digest(self.combine(self._key, framed))
            if not compare_bytes(tag, expected_tag):
                raise TamperedInputError(_DECRYPT_FAILED)

            plaintext = self._cipher_provider.decrypt(framed)
            return plaintext.decode(self._text_encoding, "surrogatepass")
        except TamperedInputError:
            logger.debug("Decryption failed: digest mismatch")
            raise TamperedInputError(_DECRYPT_FAILED) from None
        except (CryptoError, ValueError, TypeError, binascii.Error) as e:
            logger.debug(f"Decryption failed: {type(e).__name__}")
            raise DecryptionError(_DECRYPT_FAILED) from None

    def __repr__(self) -> str:
        return (
            f"TokenCodec(digest={self._digest_provider!r}, "
            f"cipher={self._cipher_provider!r})"
        )
