# file: module2_token_codec/config.py
"""
Configuration loading for the token codec.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from src.module1_primitives.crypto_errors import CryptoConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

TEXT_ENCODINGS = ("utf-16-le", "utf-16-be")

_FALLBACK_CONFIG = {
    "token": {
        "digest": "sha3_256",
        "cipher": "aes",
        "key_chars": 16,
        "text_encoding": "utf-16-le",
    },
    "logging": {
        "level": "WARNING",
    },
}


def get_default_config() -> Dict[str, Any]:
    """
    Return the packaged default configuration.

    Falls back to hardcoded defaults if ``default_config.yaml`` is not shipped
    alongside this module.
    """
    if not os.path.exists(DEFAULT_CONFIG_PATH):
        return copy.deepcopy(_FALLBACK_CONFIG)

    return _read_yaml(DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file merged over the defaults.

    Args:
        config_path: Path to YAML config file, or None for defaults only

    Returns:
        Validated configuration dictionary

    Raises:
        CryptoConfigurationError: If the file is missing, is not valid YAML,
            or holds invalid values
    """
    config = get_default_config()

    if config_path is not None:
        if not os.path.exists(config_path):
            raise CryptoConfigurationError(f"Config file not found: {config_path}")

        user_config = _read_yaml(config_path)
        for section, values in user_config.items():
            # empty section keeps the defaults
            if values is None:
                continue
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values

        logger.info(f"Loaded configuration from {config_path}")

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the ``token`` and ``logging`` sections of a configuration dictionary.

    Algorithm names are checked by the providers themselves when the codec is
    built; this covers the values the codec consumes directly.

    Raises:
        CryptoConfigurationError: If a value is missing or invalid
    """
    try:
        token_config = config["token"]
        key_chars = token_config["key_chars"]
        text_encoding = token_config["text_encoding"]
    except (KeyError, TypeError) as e:
        raise CryptoConfigurationError(f"Missing required config key: {e}") from e

    if isinstance(key_chars, bool) or not isinstance(key_chars, int) or key_chars <= 0:
        raise CryptoConfigurationError(f"token.key_chars must be a positive integer, got {key_chars!r}")

    if str(text_encoding).lower() not in TEXT_ENCODINGS:
        raise CryptoConfigurationError(
            f"token.text_encoding must be one of {TEXT_ENCODINGS}, got {text_encoding!r}"
        )

    logging_config = config.get("logging")
    if logging_config is not None and not isinstance(logging_config, dict):
        raise CryptoConfigurationError(
            f"logging section must be a mapping, got {type(logging_config).__name__}"
        )

    return config


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CryptoConfigurationError(f"Failed to read config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CryptoConfigurationError(f"Config {path} must contain a mapping, got {type(data).__name__}")

    return data
