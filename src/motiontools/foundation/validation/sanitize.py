"""Recursive input normalization applied before schema validation."""

from __future__ import annotations

from collections.abc import Mapping

from motiontools.foundation.errors import ErrorKind, JsonDict, ValidationToolException


def sanitize(value: object) -> object:
    """Trim every string in a JSON-shaped value, recursing into lists and mappings.

    Lists and tuples keep their type, mappings come back as plain dicts with
    the same keys. Other scalars and None pass through. Idempotent.

    Example:
        >>> sanitize({"name": " hi ", "tags": [" a ", "b "]})
        {'name': 'hi', 'tags': ['a', 'b']}
    """
    match value:
        case str():
            return value.strip()
        case list():
            return [sanitize(v) for v in value]
        case tuple():
            return tuple(sanitize(v) for v in value)
        case Mapping():
            return {k: sanitize(v) for k, v in value.items()}
        case _:
            return value


def sanitize_params(tool_name: str, raw: object) -> JsonDict:
    """Sanitize a raw params payload. Missing params become ``{}``.

    Raises:
        ValidationToolException: If the payload is not a mapping.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValidationToolException.create(
            tool_name, "Parameters must be an object", ErrorKind.VALIDATION_ERROR,
            details=[{"field": "params", "constraint": "type", "message": "Parameters must be an object"}],
        )
    return sanitize(raw)  # type: ignore[return-value]
