"""
Document model module.

Components:
    - fields: Closed enumeration of every key the differ reads or writes
    - tree: JSON value kinds, typed accessors, structural equality
    - types: FieldDiff and IdRow result rows
"""

from snapshot_diff.model.fields import Field, REQUIRED_META_FIELDS, CANDIDATE_CATEGORIES
from snapshot_diff.model.tree import JsonKind, kind_of, expect_object, expect_array, json_equal
from snapshot_diff.model.types import FieldDiff, IdRow

__all__ = [
    "Field",
    "REQUIRED_META_FIELDS",
    "CANDIDATE_CATEGORIES",
    "JsonKind",
    "kind_of",
    "expect_object",
    "expect_array",
    "json_equal",
    "FieldDiff",
    "IdRow",
]
