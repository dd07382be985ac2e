"""Raw input normalization.

Incoming parameters may be keyed by plain strings or by other hashable
keys (enum members, for instance). Keys are canonicalized to strings once,
at the input boundary, so the rest of the pipeline performs a single lookup.
"""

from collections.abc import Mapping, Sized
from enum import Enum
from typing import Any


def is_blank(value: Any) -> bool:
    """Return True when a value counts as absent.

    Blank values are None, False, empty or whitespace-only strings and
    empty collections. Numbers are never blank, including zero.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bytes, bytearray)):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_present(value: Any) -> bool:
    """Inverse of is_blank."""
    return not is_blank(value)


def canonical_key(key: Any) -> str:
    """Return the string form of a parameter key."""
    if isinstance(key, str):
        return str(key)
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    return str(key)


def normalize_params(params: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Canonicalize all keys of a parameter mapping to strings.

    When a plain string key and another key canonicalize to the same
    string, the string key's value wins unless it is blank.

    Args:
        params: Raw parameter mapping, or None.

    Returns:
        A new dict keyed by strings. Nested values are left untouched.
    """
    if not params:
        return {}

    normalized: dict[str, Any] = {}
    for key, value in params.items():
        if not isinstance(key, str):
            normalized[canonical_key(key)] = value

    for key, value in params.items():
        if not isinstance(key, str):
            continue
        if key not in normalized or is_present(value):
            normalized[key] = value

    return normalized
