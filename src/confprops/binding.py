"""Bind a prefixed subset of properties onto a Pydantic model."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from confprops.errors import ConfigInvalidValueError
from confprops.messages import MessageCatalog, default_catalog
from confprops.props import get_properties_with_prefix
from confprops.provider import ConfigurationProvider

__all__ = ["bind_properties"]

ModelT = TypeVar("ModelT", bound=BaseModel)


def _nest(flat: dict[str, str]) -> dict[str, Any]:
    """Expand dotted keys into nested dicts; a branch replaces a leaf of the same name."""
    nested: dict[str, Any] = {}
    # Shorter keys first so deeper branches overwrite leaves.
    for key in sorted(flat, key=lambda k: k.count(".")):
        parts = key.split(".")
        node = nested
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        if not isinstance(node.get(parts[-1]), dict):
            node[parts[-1]] = flat[key]
    return nested


def _error_entries(error: PydanticValidationError) -> list[dict[str, Any]]:
    entries: list[dict[str, Any]] = []
    for err in error.errors():
        loc = err.get("loc", ())
        entries.append(
            {
                "path": ".".join(str(segment) for segment in loc),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return entries


def bind_properties(
    props: ConfigurationProvider,
    prefix: str,
    model: type[ModelT],
    *,
    messages: MessageCatalog | None = None,
) -> ModelT:
    """Validate the properties under ``prefix`` into an instance of ``model``.

    The prefix is removed from each name and remaining dots become nesting,
    so ``db.pool.size`` binds to ``model.pool.size`` for prefix ``db.``.
    Values are trimmed strings; Pydantic's lax mode coerces them.

    Raises:
        ConfigInvalidValueError: If the values do not validate against the model.
    """
    data = _nest(get_properties_with_prefix(props, prefix, remove_prefix=True))
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        entries = _error_entries(e)
        first = entries[0]["path"] if entries else ""
        name = prefix + first
        raw = props.get_property(name, None)
        value = raw.strip() if raw is not None else None
        catalog = messages if messages is not None else default_catalog()
        raise ConfigInvalidValueError(
            name,
            value,
            message=catalog.get("conf.error.invalid.property.value", value, name),
            errors=entries,
            cause=e,
        ) from e
