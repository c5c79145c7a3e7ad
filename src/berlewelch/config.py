# file: src/berlewelch/config.py

"""
Configuration loading.

Configuration is a nested dictionary, read from YAML. The packaged
default_config.yaml supplies every key; a user file only needs the keys
it overrides.
"""

import copy
import os
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ECCConfigurationError

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "ecc": {
            "type": "berlekamp_welch",
            "berlekamp_welch": {
                "prime": 67,
                "errors": 2,
                "systematic": True,
            },
            "limits": {
                "min_errors": 1,
                "max_errors": 50,
            },
        },
        "logging": {
            "level": "WARNING",
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ECCConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ECCConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ECCConfigurationError(f"Config file {path} must contain a mapping")
    return data


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to a YAML file. If None, the packaged
                     default_config.yaml is used.

    Returns:
        Configuration dictionary with user values merged over defaults

    Raises:
        ECCConfigurationError: If an explicit config_path cannot be loaded
    """
    defaults = get_default_config()

    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            # Fallback to hardcoded defaults
            return defaults
        return _merge(defaults, _read_yaml(DEFAULT_CONFIG_PATH))

    return _merge(defaults, _read_yaml(config_path))


def get_codec_params(config: Dict[str, Any]) -> Tuple[int, int, bool]:
    """
    Extract (errors, prime, systematic) from config['ecc']['berlekamp_welch'].

    Raises:
        ECCConfigurationError: If keys are missing or have the wrong type
    """
    try:
        params = config['ecc']['berlekamp_welch']
    except (KeyError, TypeError) as e:
        raise ECCConfigurationError(f"Missing required config key: {e}") from e
    if not isinstance(params, dict):
        raise ECCConfigurationError(
            f"Config section 'ecc.berlekamp_welch' must be a mapping, got {params!r}"
        )

    errors = params.get('errors', 2)
    prime = params.get('prime', 67)
    systematic = params.get('systematic', False)

    for name, value in (('errors', errors), ('prime', prime)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ECCConfigurationError(f"'{name}' must be an integer, got {value!r}")
    if not isinstance(systematic, bool):
        raise ECCConfigurationError(f"'systematic' must be a boolean, got {systematic!r}")

    return errors, prime, systematic


def clamp_errors(value: int, minimum: int = 1, maximum: int = 50) -> int:
    """Clamp a requested error budget into [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def _section(config: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    """Nested mapping at keys, {} where absent."""
    section = config
    path = []
    for key in keys:
        path.append(key)
        section = section.get(key, {})
        if not isinstance(section, dict):
            raise ECCConfigurationError(
                f"Config section '{'.'.join(path)}' must be a mapping, got {section!r}"
            )
    return section


def get_error_limits(config: Dict[str, Any]) -> Tuple[int, int]:
    limits = _section(config, 'ecc', 'limits')
    minimum = limits.get('min_errors', 1)
    maximum = limits.get('max_errors', 50)
    for name, value in (('min_errors', minimum), ('max_errors', maximum)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ECCConfigurationError(f"'{name}' must be an integer, got {value!r}")
    if minimum < 1 or maximum < minimum:
        raise ECCConfigurationError(
            f"Invalid error limits: min_errors={minimum}, max_errors={maximum}"
        )
    return minimum, maximum


def get_log_level(config: Dict[str, Any]) -> str:
    level = _section(config, 'logging').get('level', 'WARNING')
    if not isinstance(level, str):
        raise ECCConfigurationError(f"'logging.level' must be a string, got {level!r}")
    return level
