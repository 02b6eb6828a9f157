"""Reading YAML files that must hold a single mapping."""

from __future__ import annotations

import os
from typing import Any

import yaml

from confprops.errors import ConfigFileError, ConfigNotFoundError

__all__ = ["load_yaml_mapping"]


def load_yaml_mapping(yaml_path: str, kind: str = "Configuration") -> dict[str, Any]:
    """Load a YAML file whose document is a mapping.

    Args:
        yaml_path: Path to the YAML file.
        kind: What the file holds, used in the error message.

    Returns:
        The mapping, or an empty dict for an empty document.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigFileError: If the YAML is invalid or is not a mapping.
    """
    if not os.path.isfile(yaml_path):
        raise ConfigNotFoundError(config_path=yaml_path)

    with open(yaml_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigFileError(f"Invalid YAML in {yaml_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(f"{kind} must be a mapping, got {type(data).__name__}")
    return data
