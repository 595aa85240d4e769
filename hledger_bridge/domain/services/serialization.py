"""Conversion of domain values into JSON-compatible structures."""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum


def to_jsonable(value):
    """Convert a domain value into plain JSON-compatible data.

    Decimals become strings so that quantities keep their exact precision.
    Dataclasses carrying a ``kind`` discriminator expose it as a key.

    Args:
        value: Domain value, list, tuple, dict or scalar.

    Returns:
        Structure made of dicts, lists, strings, numbers, bools and None.
    """
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        data = {}
        kind = getattr(type(value), "kind", None)
        if isinstance(kind, str):
            data["kind"] = kind
        for item in fields(value):
            data[item.name] = to_jsonable(getattr(value, item.name))
        return data
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    return value


__all__ = ["to_jsonable"]
