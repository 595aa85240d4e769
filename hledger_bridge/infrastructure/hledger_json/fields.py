"""Permissive accessors for fields of decoded hledger JSON objects.

Optional fields never fail a report: a missing key or a value of the wrong
type yields the supplied default. Required containers go through
``require_key`` and raise ``ReportParseError``.
"""

from hledger_bridge.domain.errors import ReportParseError


def get_str(obj: dict, key: str, default: str = "") -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else default


def get_optional_str(obj: dict, key: str) -> str | None:
    value = obj.get(key)
    return value if isinstance(value, str) else None


def get_bool(obj: dict, key: str, default: bool = False) -> bool:
    value = obj.get(key)
    return value if isinstance(value, bool) else default


def get_int(obj: dict, key: str, default: int = 0) -> int:
    """Return a non-negative integer field, or ``default``."""
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def as_list(value) -> list:
    """Return ``value`` when it is a JSON array, else an empty list."""
    return value if isinstance(value, list) else []


def require_object(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise ReportParseError(f"Expected object for {what}")
    return value


def require_key(obj: dict, key: str, what: str):
    """Return ``obj[key]`` or fail naming the missing container."""
    if key not in obj:
        raise ReportParseError(f"Missing {key} in {what}")
    return obj[key]


def parse_tags(value) -> list[tuple[str, str]]:
    """Parse ``[[name, value], ...]`` tags, keeping order and duplicates."""
    tags = []
    for pair in as_list(value):
        if isinstance(pair, list) and len(pair) == 2:
            name = pair[0] if isinstance(pair[0], str) else ""
            tag_value = pair[1] if isinstance(pair[1], str) else ""
            tags.append((name, tag_value))
    return tags


__all__ = [
    "get_str",
    "get_optional_str",
    "get_bool",
    "get_int",
    "as_list",
    "require_object",
    "require_key",
    "parse_tags",
]
