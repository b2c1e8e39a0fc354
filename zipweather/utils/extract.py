"""
Typed access to decoded JSON.

The upstream APIs hand back loosely typed trees. These helpers read one
level at a time and apply the same rule everywhere:

* key absent          -> return the default (``None`` for containers)
* key present, right type -> return the value
* key present, wrong type -> raise `MalformedResponse`

`path` is the dotted location of the container being read; it only shows
up in error messages.
"""
from typing import Any, Optional

from ..errors import MalformedResponse


def _join(path: str, key) -> str:
    if not path:
        return str(key)
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}"


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def expect_mapping(value: Any, path: str = "$") -> dict:
    """Return `value` if it is a JSON object, else raise."""
    if not isinstance(value, dict):
        raise MalformedResponse(path, "an object", value)
    return value


def get_mapping(doc: dict, key: str, path: str = "") -> Optional[dict]:
    if key not in doc:
        return None
    value = doc[key]
    if not isinstance(value, dict):
        raise MalformedResponse(_join(path, key), "an object", value)
    return value


def get_sequence(doc: dict, key: str, path: str = "") -> Optional[list]:
    if key not in doc:
        return None
    value = doc[key]
    if not isinstance(value, list):
        raise MalformedResponse(_join(path, key), "an array", value)
    return value


def get_text(doc: dict, key: str, path: str = "", default: str = "") -> str:
    if key not in doc:
        return default
    value = doc[key]
    if not isinstance(value, str):
        raise MalformedResponse(_join(path, key), "a string", value)
    return value


def get_number(
    doc: dict,
    key: str,
    path: str = "",
    default: float = 0.0,
    nullable: bool = False,
) -> float:
    """
    Read a numeric field as a float.

    With ``nullable=True`` a JSON ``null`` is treated like a missing key.
    """
    if key not in doc:
        return default
    value = doc[key]
    if value is None and nullable:
        return default
    if not _is_number(value):
        raise MalformedResponse(_join(path, key), "a number", value)
    return float(value)


def first_item(items: list) -> Any:
    """First element of `items`, or ``None`` when the list is empty."""
    if not items:
        return None
    return items[0]
