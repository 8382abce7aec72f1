# config.py

import copy
import json
import os
from constants import DEFAULT_CONFIG
from exceptions import ConfigurationError


def _merge(base: dict, override: dict) -> dict:
    """Recursively overlays `override` on a copy of `base`."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = 'config.json') -> dict:
    """
    Loads the JSON configuration and merges it over DEFAULT_CONFIG.

    Data Contract:
    - Inputs: config_path (str) - Path to the configuration file.
    - Outputs: The merged configuration dictionary.
    - Side Effects: None.
    - Invariants: A missing file yields a copy of DEFAULT_CONFIG. Malformed
      JSON or a non-object document raises ConfigurationError.
    """
    if not os.path.exists(config_path):
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON: {e}", config_path) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read file: {e}", config_path) from e

    if not isinstance(user_config, dict):
        raise ConfigurationError("Top level must be a JSON object", config_path)

    return _merge(DEFAULT_CONFIG, user_config)
