"""
Typed field readers for upstream JSON objects.

A missing key or a JSON null reads as the zero value of the field type.
A value of the wrong type raises TypeError.
"""

from typing import Any, Dict, List, Mapping, Tuple


def ensure_object(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what}: expected object, got {type(value).__name__}")
    return value


def get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key!r}: expected string, got {type(value).__name__}")
    return value


def get_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key!r}: expected integer, got {type(value).__name__}")
    return value


def get_list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key!r}: expected array, got {type(value).__name__}")
    return value


def get_artist_names(data: Mapping[str, Any]) -> Tuple[str, ...]:
    """Read the credited names from an 'artist-credit' array, in order."""
    return tuple(
        get_str(ensure_object(credit, "artist-credit"), "name")
        for credit in get_list(data, "artist-credit")
    )


def artist_credit(names: Tuple[str, ...]) -> List[Dict[str, str]]:
    """Inverse of get_artist_names."""
    return [{"name": name} for name in names]
