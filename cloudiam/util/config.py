"""
Configuration utilities for cloudiam.
Provides configuration loading from the environment and from files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = "CLOUDIAM_") -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        return cast_type(value)
    except (ValueError, TypeError):
        return default


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = "CLOUDIAM_") -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load a mapping from a JSON or YAML file."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext == '.json':
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    # An empty YAML document loads as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {file_path}")
    return data
