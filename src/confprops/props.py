"""Typed accessors over a configuration provider.

Every accessor reads at most one raw value through
:func:`get_property`, which trims it and treats an empty result as unset.
Accessors without a caller-supplied default raise
:class:`~confprops.errors.ConfigMissingError` for required properties.
The int and boolean accessors never raise; they fall back to their default.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import SplitResult, urlsplit

from confprops.errors import ConfigInvalidValueError, ConfigMissingError
from confprops.messages import MessageCatalog, default_catalog
from confprops.provider import ConfigurationProvider

__all__ = [
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
]

_logger = logging.getLogger("confprops.props")

DEFAULT_PROP_IS_REQUIRED = True
"""Whether a property is required when the caller does not say otherwise."""

_NOT_NAME_CHAR = re.compile(r"[^a-z0-9.]")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_URI_ILLEGAL = re.compile(r'[ "<>\\^`{|}]')
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _catalog(messages: MessageCatalog | None) -> MessageCatalog:
    return messages if messages is not None else default_catalog()


def _split(value: str, delimiter: str) -> list[str]:
    """Split ``value`` on the regex ``delimiter``.

    Capture groups in the delimiter are not returned, a zero-width match at
    the start does not produce a leading empty segment, and trailing empty
    segments are dropped.
    """
    segments: list[str] = []
    pos = 0
    for match in re.finditer(delimiter, value):
        if match.end() == 0:
            continue
        segments.append(value[pos : match.start()])
        pos = match.end()
    if not segments:
        return [value]
    segments.append(value[pos:])
    while segments and not segments[-1]:
        segments.pop()
    return segments


def normalize_property_name(raw_property_name: str | None) -> str | None:
    """Normalize a property name.

    Letters are lower-cased, each space becomes one period, and every
    character that is not a letter, digit, or period is removed. Blank
    input is returned unchanged.
    """
    if raw_property_name is None or not raw_property_name.strip():
        return raw_property_name
    return _NOT_NAME_CHAR.sub("", raw_property_name.lower().replace(" ", "."))


def get_property(
    props: ConfigurationProvider,
    name: str,
    required: bool = DEFAULT_PROP_IS_REQUIRED,
    *,
    messages: MessageCatalog | None = None,
) -> str | None:
    """Get a trimmed property value.

    Args:
        props: The configuration provider.
        name: Property name.
        required: Raise when the property is unset or blank.
        messages: Catalog for the error message; defaults to the built-in one.

    Returns:
        The trimmed value, or None when unset and not required.

    Raises:
        ConfigMissingError: If the property is required but not set.
    """
    raw = props.get_property(name, None)
    value = raw.strip() if raw is not None else None
    if not value:
        if required:
            raise ConfigMissingError(
                name,
                message=_catalog(messages).get("conf.error.required.prop.not.set", name),
            )
        return None
    return value


def get_property_with_default(
    props: ConfigurationProvider,
    name: str,
    default_value: str | None,
) -> str | None:
    """Get a property value, or ``default_value`` verbatim when it is unset."""
    value = get_property(props, name, False)
    if value is None:
        return default_value
    return value


def _parse_uri(value: str) -> SplitResult:
    if _URI_ILLEGAL.search(value) or not value.isprintable():
        raise ValueError("illegal character in URI")
    if _BAD_PERCENT.search(value):
        raise ValueError("malformed percent escape in URI")
    if value.startswith(":"):
        raise ValueError("expected scheme name before ':'")
    uri = urlsplit(value)
    uri.port  # raises ValueError for a non-numeric or out-of-range port
    return uri


def get_property_as_uri(
    props: ConfigurationProvider,
    name: str,
    required: bool = DEFAULT_PROP_IS_REQUIRED,
    *,
    messages: MessageCatalog | None = None,
) -> SplitResult | None:
    """Get a property value parsed as an absolute or relative URI reference.

    Returns None when the property is unset and not required.

    Raises:
        ConfigMissingError: If the property is required but not set.
        ConfigInvalidValueError: If the value is not a valid URI.
    """
    value = get_property(props, name, required, messages=messages)
    if value is None:
        return None
    try:
        return _parse_uri(value)
    except ValueError as e:
        raise ConfigInvalidValueError(
            name,
            value,
            message=_catalog(messages).get("conf.error.invalid.property.value", value, name),
            cause=e,
        ) from e


def get_property_as_int(
    props: ConfigurationProvider,
    name: str,
    default_value: int,
    *,
    messages: MessageCatalog | None = None,
) -> int:
    """Get a property value as a base-10 int, or ``default_value``.

    Invalid text is logged as a warning, then the default is used and logged
    at info level like an unset property. The text is matched against a
    pattern rather than parsed, so no traceback is attached to the warning.
    Any error from the provider is treated as unset. Never raises.
    """
    catalog = _catalog(messages)
    try:
        value = get_property(props, name, False, messages=messages)
    except Exception:
        _logger.debug("Reading %s failed; using default %s", name, default_value, exc_info=True)
        value = None

    if value is not None:
        if _INT_PATTERN.fullmatch(value):
            return int(value)
        _logger.warning(
            catalog.get("conf.warn.invalid.value.using.default", name, value, default_value)
        )

    _logger.info(catalog.get("conf.info.property.not.set.using.default", name, default_value))
    return default_value


def get_property_as_boolean(
    props: ConfigurationProvider,
    name: str,
    default_value: bool,
) -> bool:
    """Get a property value as a bool, or ``default_value`` when unset.

    Only a case-insensitive ``true`` is True. Any other set value, including
    ``yes`` and ``1``, is False rather than the default.
    """
    try:
        value = get_property(props, name, False)
    except Exception:
        _logger.debug("Reading %s failed; using default %s", name, default_value, exc_info=True)
        return default_value
    if value is None:
        return default_value
    return value.lower() == "true"


def get_property_as_string_list(
    props: ConfigurationProvider,
    name: str,
    delimiter: str = ",",
    required: bool = DEFAULT_PROP_IS_REQUIRED,
    trim: bool = True,
    *,
    messages: MessageCatalog | None = None,
) -> list[str]:
    """Get a delimited property value as a list of strings.

    Args:
        props: The configuration provider.
        name: Property name.
        delimiter: Regular expression to split the value on.
        required: Raise when the property is not set.
        trim: Trim whitespace from each item.
        messages: Catalog for the error message.

    Returns:
        The non-empty items in order. Empty when the property is unset and
        not required; never None.

    Raises:
        ConfigMissingError: If the property is required but not set.
    """
    items: list[str] = []
    delimited_value = get_property(props, name, required, messages=messages)
    if delimited_value:
        for item in _split(delimited_value, delimiter):
            if trim:
                item = item.strip()
            if item:
                items.append(item)
    return items


def get_properties_with_prefix(
    props: ConfigurationProvider,
    prefix: str,
    remove_prefix: bool = False,
    value_becomes_key: bool = False,
) -> dict[str, str]:
    """Get the properties whose names begin with ``prefix``.

    Values are trimmed. With ``remove_prefix`` the prefix is cut from each
    name. With ``value_becomes_key`` the values become the keys of the
    returned dict and the names become its values; on collision the last
    entry wins.
    """
    props_out: dict[str, str] = {}
    for key, raw in props.get_properties_with_prefix(prefix).items():
        prop_name = key[len(prefix) :] if remove_prefix else key
        prop_value = raw.strip() if raw is not None else raw
        if value_becomes_key:
            props_out[prop_value] = prop_name
        else:
            props_out[prop_name] = prop_value
    return props_out


def does_delimited_property_value_contain(
    props: ConfigurationProvider,
    name: str,
    check_for: str,
    *,
    default_prop_value: str | None = None,
    delimiter: str = ",",
    trim_whitespace: bool = True,
    case_sensitive: bool = False,
) -> bool:
    """Find out whether a delimited property value contains ``check_for``.

    With the defaults the value is split on commas, whitespace is trimmed
    before comparing, and the comparison ignores case.

    Args:
        props: The configuration provider.
        name: Property name.
        check_for: The sub-value to look for.
        default_prop_value: Value to search when the property is unset.
        delimiter: Regular expression to split the value on.
        trim_whitespace: Trim ``check_for`` and each item before comparing.
        case_sensitive: Require a case-sensitive match.
    """
    prop_value = get_property(props, name, False)
    if prop_value is None and default_prop_value is not None:
        prop_value = default_prop_value

    if not prop_value or not prop_value.strip():
        return False

    if trim_whitespace:
        check_for = check_for.strip()
    wanted = check_for if case_sensitive else check_for.casefold()
    for value in _split(prop_value, delimiter):
        if trim_whitespace:
            value = value.strip()
        if (value if case_sensitive else value.casefold()) == wanted:
            return True
    return False
