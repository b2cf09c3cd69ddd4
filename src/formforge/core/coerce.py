"""Tolerant-shape coercion for form description properties.

Classes, options, additional attributes and validation rules may arrive as
a native list, a mapping, a JSON-encoded string or a delimited string.
Everything is funnelled through :func:`coerce_shape`, which applies one
fixed precedence:

1. ``None`` -> empty list
2. list/tuple -> list, mapping -> dict (order kept)
3. blank string -> empty list
4. string holding a JSON array or object -> the decoded value
5. other strings -> split on ``|`` if present, else on whitespace

A JSON array string and a space-separated string never collide because the
JSON attempt runs first and only accepts containers.
"""

import json
from collections.abc import Mapping
from typing import Any

from formforge.core.errors import InvalidClassesError, InvalidPropertyError

CLASS_PROPERTIES = frozenset({"classes", "inputClasses", "containerClasses"})


def coerce_shape(value: Any, property_name: str = "") -> list | dict:
    """Coerce a tolerant-shape property to a list or dict.

    Args:
        value: The raw property value from a form description
        property_name: Wire-format key, used to pick the error kind

    Raises:
        InvalidClassesError: For class-like properties of an unusable type
        InvalidPropertyError: For other properties of an unusable type
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            decoded = json.loads(value)
        except ValueError:
            decoded = None
        if isinstance(decoded, (list, dict)):
            return decoded
        separator = "|" if "|" in value else None
        return [token.strip() for token in value.split(separator) if token.strip()]

    error_class = (
        InvalidClassesError if property_name in CLASS_PROPERTIES else InvalidPropertyError
    )
    label = property_name or "property"
    raise error_class(
        f"{label} must be a list, mapping or string, got {type(value).__name__}"
    )


def coerce_classes(value: Any, property_name: str = "classes") -> list[str]:
    """Coerce a class-list property to a list of strings.

    A mapping contributes its values, which is what a JSON object of
    classes decodes to.
    """
    shaped = coerce_shape(value, property_name)
    items = shaped.values() if isinstance(shaped, dict) else shaped
    return [str(item) for item in items if item not in (None, "")]


def coerce_options(value: Any) -> dict[str, Any]:
    """Coerce options to an ordered ``value -> label`` mapping.

    A flat list becomes ``{item: item}``. A mapping whose values are lists
    or mappings is treated as one level of option groups and each group is
    normalised the same way. Option values are always strings.
    """
    return _normalise_options(coerce_shape(value, "options"))


def _normalise_options(options: list | dict) -> dict[str, Any]:
    if isinstance(options, list):
        return {str(item): str(item) for item in options}

    result: dict[str, Any] = {}
    for key, label in options.items():
        if isinstance(label, (list, tuple, Mapping)):
            result[str(key)] = _normalise_options(
                list(label) if isinstance(label, tuple) else label
            )
        else:
            result[str(key)] = "" if label is None else str(label)
    return result


def coerce_attributes(value: Any) -> dict[str, str]:
    """Coerce additional attributes to a ``name -> value`` mapping.

    List tokens like ``step=1`` become ``{"step": "1"}``; a bare token such
    as ``autofocus`` maps to itself.
    """
    shaped = coerce_shape(value, "additionalAttributes")
    if isinstance(shaped, dict):
        return {str(k): "" if v is None else str(v) for k, v in shaped.items()}

    attributes: dict[str, str] = {}
    for token in shaped:
        token = str(token)
        if "=" in token:
            name, _, attr_value = token.partition("=")
            attributes[name.strip()] = attr_value.strip().strip("\"'")
        else:
            attributes[token] = token
    return attributes


def coerce_validation(value: Any) -> list:
    """Coerce validation rule descriptors to an ordered list.

    Descriptors are opaque here; a mapping contributes its values.
    """
    shaped = coerce_shape(value, "validation")
    return list(shaped.values()) if isinstance(shaped, dict) else shaped


def coerce_value(value: Any) -> str:
    """Canonicalise a field value to the single string slot a field holds.

    Non-string values (lists, objects, numbers, booleans) are JSON-encoded
    rather than joined, so a separator can never clash with the content.
    The owning field decodes them again when it renders.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def as_bool(value: Any) -> bool:
    """Read a boolean flag that may arrive as a string from a description file."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on", "required")
    return bool(value)
