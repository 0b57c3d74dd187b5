# file: module2_token_codec/cli.py
"""
Command-line front end for the signed token codec.

Examples:
  # Encrypt (passphrase from the environment)
  TOKEN_CODEC_PASSPHRASE=0123456789ABCDEF \\
      python -m src.module2_token_codec.cli encrypt --text "hello world"

  # Decrypt with an explicit passphrase and config file
  python -m src.module2_token_codec.cli decrypt \\
      --passphrase 0123456789ABCDEF \\
      --config token_config.yaml \\
      --text "<token>"
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from src.module1_primitives.crypto_errors import CryptoError, CryptoConfigurationError, InvalidKeySizeError, InvalidArgumentError
from .codec import TokenCodec
from .config import get_default_config, load_config

logger = logging.getLogger(__name__)


PASSPHRASE_ENV = "TOKEN_CODEC_PASSPHRASE"

EXIT_OK = 0
EXIT_CRYPTO_FAILURE = 1
EXIT_USAGE = 2


def setup_logging(level: str = "WARNING", verbose: bool = False):
    """Configure logging for the command-line tool."""
    if verbose:
        level = "INFO"
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Encrypt text into signed tokens and decrypt them again',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        'op',
        choices=['encrypt', 'decrypt'],
        help='Operation to perform'
    )

    parser.add_argument(
        '--text',
        type=str,
        default=None,
        help='Plaintext (encrypt) or token (decrypt); read from stdin if omitted'
    )

    parser.add_argument(
        '--passphrase',
        type=str,
        default=None,
        help=f'Key passphrase, 16+ characters (default: ${PASSPHRASE_ENV})'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged defaults)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output JSON to stdout'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def _emit(payload: dict, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload))
    elif "error" in payload:
        print(f"Error: {payload['error']}", file=sys.stderr)
    else:
        key = "token" if "token" in payload else "plaintext"
        print(payload[key])


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except CryptoConfigurationError as e:
        setup_logging(verbose=args.verbose)
        _emit({"error": str(e)}, args.json)
        return EXIT_USAGE

    setup_logging((config.get("logging") or {}).get("level", "WARNING"), args.verbose)

    passphrase = args.passphrase if args.passphrase is not None else os.environ.get(PASSPHRASE_ENV)
    if not passphrase:
        _emit({"error": f"--passphrase or ${PASSPHRASE_ENV} is required"}, args.json)
        return EXIT_USAGE

    text = args.text if args.text is not None else sys.stdin.read().rstrip("\n")

    try:
        codec = TokenCodec(passphrase, config)
    except (CryptoConfigurationError, InvalidKeySizeError, InvalidArgumentError) as e:
        _emit({"error": str(e)}, args.json)
        return EXIT_USAGE

    try:
        if args.op == "encrypt":
            result = {"op": "encrypt", "token": codec.encrypt(text)}
        else:
            result = {"op": "decrypt", "plaintext": codec.decrypt(text)}
    except CryptoError as e:
        logger.info(f"{args.op} failed ({e.kind.value})")
        _emit({"error": str(e), "kind": e.kind.value}, args.json)
        return EXIT_CRYPTO_FAILURE

    _emit(result, args.json)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
