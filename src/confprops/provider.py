"""Configuration provider port and the in-memory adapter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

__all__ = ["ConfigurationProvider", "InMemoryProvider"]


@runtime_checkable
class ConfigurationProvider(Protocol):
    """Read-only view of a key-value configuration source."""

    def get_property(self, name: str, default: str | None = None) -> str | None:
        """Return the raw value of ``name``, or ``default`` when it is not set."""
        ...

    def get_properties_with_prefix(self, prefix: str) -> Mapping[str, str]:
        """Return every property whose name starts with ``prefix``."""
        ...


class InMemoryProvider:
    """Dict-backed provider for tests and programmatic overrides."""

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._properties: dict[str, str] = dict(properties or {})

    def get_property(self, name: str, default: str | None = None) -> str | None:
        return self._properties.get(name, default)

    def get_properties_with_prefix(self, prefix: str) -> dict[str, str]:
        return {k: v for k, v in self._properties.items() if k.startswith(prefix)}

    def set_property(self, name: str, value: str) -> None:
        self._properties[name] = value

    def remove_property(self, name: str) -> bool:
        """Remove ``name``; return True if it was set."""
        return self._properties.pop(name, None) is not None
