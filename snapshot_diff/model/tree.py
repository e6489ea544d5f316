"""
JSON document tree helpers.

Documents are plain parsed-JSON trees (dict, list, str, int, float, bool,
None). This module classifies values into a closed set of kinds, provides
typed accessors that fail with DocumentShapeError on a kind mismatch, and
defines the structural equality used for every comparison in the differ.

Usage:
    ```python
    from snapshot_diff.model.tree import JsonKind, kind_of, expect_object, json_equal

    kind_of({"a": 1})                    # JsonKind.OBJECT
    expect_object([1, 2], "meta")        # raises DocumentShapeError
    json_equal({"a": 1}, {"a": 1.0})     # True
    json_equal(True, 1)                  # False
    ```
"""

from enum import Enum
from typing import Any, Dict, List

from snapshot_diff.errors import DocumentShapeError


class JsonKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: Any) -> JsonKind:
    """
    Classify a value of a parsed JSON tree.

    Raises:
        TypeError: If value is not something a JSON parser produces
    """
    if value is None:
        return JsonKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _describe(value: Any) -> str:
    try:
        return kind_of(value).value
    except TypeError:
        return type(value).__name__


def expect_object(value: Any, path: str) -> Dict[str, Any]:
    """Return value if it is a JSON object, else raise DocumentShapeError."""
    if not isinstance(value, dict):
        raise DocumentShapeError(path, JsonKind.OBJECT.value, _describe(value))
    return value


def expect_array(value: Any, path: str) -> List[Any]:
    """Return value if it is a JSON array, else raise DocumentShapeError."""
    if not isinstance(value, (list, tuple)):
        raise DocumentShapeError(path, JsonKind.ARRAY.value, _describe(value))
    return list(value)


def json_equal(left: Any, right: Any) -> bool:
    """
    Structural equality over JSON trees.

    Rules:
        - booleans never equal numbers
        - int and float compare numerically
        - objects: same key set, values equal (key order ignored)
        - arrays: same length, elements equal in order
        - null only equals null

    Args:
        left: First value
        right: Second value

    Returns:
        bool: True if both trees are structurally equal
    """
    left_kind = kind_of(left)
    right_kind = kind_of(right)
    if left_kind is not right_kind:
        return False

    if left_kind is JsonKind.OBJECT:
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    if left_kind is JsonKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    return left == right
