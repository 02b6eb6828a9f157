"""YAML-backed configuration provider with dot-path key support."""

from __future__ import annotations

import logging
import threading
from typing import Any

from confprops.errors import ConfigFileError
from confprops.utils.yaml_file import load_yaml_mapping

__all__ = ["Config"]


def _render(value: Any) -> str | None:
    """Render a YAML scalar or list as a property string; None when not a value."""
    if value is None or isinstance(value, dict):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        items = (_render(item) for item in value)
        return ",".join(item for item in items if item is not None)
    return str(value)


def _flatten(data: dict[str, Any], parent: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        path = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, path))
            continue
        rendered = _render(value)
        if rendered is not None:
            flat[path] = rendered
    return flat


class Config:
    """Configuration provider over a nested mapping, usually loaded from YAML.

    Nested keys are addressed by dot-path, so ``db.host`` reads
    ``data["db"]["host"]``. Booleans render as ``true``/``false`` and lists
    as comma-joined strings.

    Thread safety:
        Internally synchronized. Reads and ``reload`` are safe to call
        concurrently.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._flat: dict[str, str] = _flatten(self._data)
        self._yaml_path: str | None = None
        self._logger: logging.Logger = logging.getLogger("confprops.config")
        self._lock = threading.Lock()

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config instance holding the file's mapping.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigFileError: If the YAML is invalid or is not a mapping.
        """
        config = cls(data=load_yaml_mapping(yaml_path))
        config._yaml_path = yaml_path
        config._logger.debug("Loaded configuration from %s", yaml_path)
        return config

    @property
    def yaml_path(self) -> str | None:
        """Path of the file this config was loaded from, if any."""
        return self._yaml_path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw (unrendered) configuration value by dot-path key."""
        with self._lock:
            current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def get_property(self, name: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._flat.get(name, default)

    def get_properties_with_prefix(self, prefix: str) -> dict[str, str]:
        with self._lock:
            return {k: v for k, v in self._flat.items() if k.startswith(prefix)}

    def reload(self) -> None:
        """Re-read the configuration from the original YAML file.

        Only works if the Config was created via Config.load().
        Raises ConfigFileError if no YAML path was stored.
        """
        with self._lock:
            yaml_path = self._yaml_path
        if yaml_path is None:
            raise ConfigFileError("Cannot reload: Config was not loaded from a YAML file")
        data = load_yaml_mapping(yaml_path)
        flat = _flatten(data)
        with self._lock:
            self._data = data
            self._flat = flat
        self._logger.debug("Reloaded configuration from %s", yaml_path)
