"""Read FD2NF settings from config.yaml.

The file holds one mapping per section (``logging``, ``engine``). Environment
overrides are applied by the callers, not here.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

CONFIG_FILE = Path(__file__).with_name("config.yaml")

PathLike = Union[str, Path]


def load_config(path: Optional[PathLike] = None) -> Dict[str, Any]:
    """
    Load every section of the configuration file.

    Args:
        path: File to read; defaults to the config.yaml next to this module

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping of sections
    """
    config_file = Path(path) if path is not None else CONFIG_FILE
    if not config_file.exists():
        raise FileNotFoundError(f"config.yaml not found at {config_file}")

    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"{config_file} must contain a mapping of sections")
    return config


def get_config(section: str, path: Optional[PathLike] = None) -> Dict[str, Any]:
    """One section as a dict; a missing or empty section is ``{}``."""
    value = load_config(path).get(section) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{section}' must be a mapping, got {type(value).__name__}")
    return value


def get_int(section: str, key: str, default: int, path: Optional[PathLike] = None) -> int:
    """Integer setting from ``section``; ``default`` when the key is absent.

    Raises:
        ValueError: If the value is present but not an integer
    """
    value = get_config(section, path).get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Config value {section}.{key} must be an integer, got {value!r}")
    return value
