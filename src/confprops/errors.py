"""Error hierarchy for confprops."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigurationError",
    "ConfigMissingError",
    "ConfigInvalidValueError",
    "ConfigNotFoundError",
    "ConfigFileError",
    "ErrorCodes",
]


class ConfigurationError(Exception):
    """Base error for all configuration problems."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigMissingError(ConfigurationError):
    """Raised when a required property has no value."""

    def __init__(self, name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_MISSING",
            message=message or f"Required configuration property not set: {name}",
            details={"name": name},
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The property name that had no value."""
        return self.details["name"]


class ConfigInvalidValueError(ConfigurationError):
    """Raised when a property value cannot be interpreted as the requested type."""

    def __init__(
        self,
        name: str,
        value: Any,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"name": name, "value": value}
        if errors is not None:
            details["errors"] = errors
        super().__init__(
            code="CONFIG_INVALID_VALUE",
            message=message or f"Invalid value {value!r} for configuration property {name}",
            details=details,
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The property name whose value was rejected."""
        return self.details["name"]

    @property
    def value(self) -> Any:
        """The rejected raw value."""
        return self.details["value"]


class ConfigNotFoundError(ConfigurationError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigFileError(ConfigurationError):
    """Raised when a configuration file cannot be parsed or used."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_FILE_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All confprops error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_MISSING:
            abort_startup()
    """

    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID_VALUE = "CONFIG_INVALID_VALUE"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_FILE_INVALID = "CONFIG_FILE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
