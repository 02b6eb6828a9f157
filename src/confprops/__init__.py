"""confprops - Typed accessors over key-value configuration properties."""

from __future__ import annotations

# Accessors
from confprops.props import (
    DEFAULT_PROP_IS_REQUIRED,
    does_delimited_property_value_contain,
    get_properties_with_prefix,
    get_property,
    get_property_as_boolean,
    get_property_as_int,
    get_property_as_string_list,
    get_property_as_uri,
    get_property_with_default,
    normalize_property_name,
)

# Providers
from confprops.provider import ConfigurationProvider, InMemoryProvider
from confprops.config import Config

# Messages
from confprops.messages import DEFAULT_MESSAGES, MessageCatalog, default_catalog

# Binding
from confprops.binding import bind_properties

# Errors
from confprops.errors import (
    ConfigFileError,
    ConfigInvalidValueError,
    ConfigMissingError,
    ConfigNotFoundError,
    ConfigurationError,
    ErrorCodes,
)

__version__ = "0.1.0"

__all__ = [
    # Accessors
    "DEFAULT_PROP_IS_REQUIRED",
    "normalize_property_name",
    "get_property",
    "get_property_with_default",
    "get_property_as_uri",
    "get_property_as_int",
    "get_property_as_boolean",
    "get_property_as_string_list",
    "get_properties_with_prefix",
    "does_delimited_property_value_contain",
    # Providers
    "ConfigurationProvider",
    "InMemoryProvider",
    "Config",
    # Messages
    "DEFAULT_MESSAGES",
    "MessageCatalog",
    "default_catalog",
    # Binding
    "bind_properties",
    # Errors
    "ConfigurationError",
    "ConfigMissingError",
    "ConfigInvalidValueError",
    "ConfigNotFoundError",
    "ConfigFileError",
    "ErrorCodes",
]
