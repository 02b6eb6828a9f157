"""Message catalog used to format configuration diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from confprops.errors import ConfigFileError
from confprops.utils.yaml_file import load_yaml_mapping

__all__ = ["DEFAULT_MESSAGES", "MessageCatalog", "default_catalog"]

_logger = logging.getLogger("confprops.messages")

DEFAULT_MESSAGES: dict[str, str] = {
    "conf.error.required.prop.not.set": (
        'Required configuration property "{0}" is not set.'
    ),
    "conf.error.invalid.property.value": (
        'Invalid value "{0}" for configuration property "{1}".'
    ),
    "conf.warn.invalid.value.using.default": (
        'Configuration property "{0}" has invalid value "{1}"; using default value "{2}".'
    ),
    "conf.info.property.not.set.using.default": (
        'Configuration property "{0}" is not set; using default value "{1}".'
    ),
}


class MessageCatalog:
    """Formats messages by key with positional ``{0}``-style placeholders.

    Unknown keys never raise: the key itself is returned, followed by the
    arguments, so a diagnostic is still produced when a catalog is incomplete.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages: dict[str, str] = dict(messages or {})

    @classmethod
    def load(cls, yaml_path: str) -> MessageCatalog:
        """Load a catalog from a flat YAML mapping of key to message pattern.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigFileError: If the YAML is invalid or is not a flat mapping.
        """
        data = load_yaml_mapping(yaml_path, kind="Message catalog")
        for key, pattern in data.items():
            if not isinstance(pattern, str):
                raise ConfigFileError(
                    f"Message '{key}' must be a string, got {type(pattern).__name__}"
                )
        return cls({str(k): v for k, v in data.items()})

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def get(self, key: str, *args: Any) -> str:
        """Format the message registered under ``key`` with ``args``."""
        pattern = self._messages.get(key)
        if pattern is None:
            _logger.debug("No message registered for key %s", key)
            return " ".join([key, *(str(a) for a in args)])
        try:
            return pattern.format(*args)
        except (IndexError, KeyError, ValueError):
            _logger.debug("Message pattern for %s does not fit its arguments", key)
            return " ".join([pattern, *(str(a) for a in args)])

    def merged(self, overrides: Mapping[str, str] | MessageCatalog) -> MessageCatalog:
        """Return a new catalog with ``overrides`` layered over this one."""
        extra = overrides._messages if isinstance(overrides, MessageCatalog) else overrides
        return MessageCatalog({**self._messages, **extra})


_DEFAULT_CATALOG = MessageCatalog(DEFAULT_MESSAGES)


def default_catalog() -> MessageCatalog:
    """Return the built-in English catalog."""
    return _DEFAULT_CATALOG
