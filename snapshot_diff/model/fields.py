"""
Field names shared by validation and result construction.

Every key the differ reads from a document or writes into a diff result is a
member of this enumeration. Members are str subclasses, so `Field.META.value`
and `Field.META` are both usable as dict keys when building plain JSON trees.
"""

from enum import Enum
from typing import Tuple


class Field(str, Enum):
    # document
    ID = "id"
    META = "meta"
    CANDIDATES = "candidates"

    # meta
    TITLE = "title"
    START_TIME = "startTime"
    END_TIME = "endTime"

    # FieldDiff
    FIELD = "field"
    BEFORE = "before"
    AFTER = "after"

    # candidate categories
    REMOVED = "removed"
    EDITED = "edited"
    ADDED = "added"


REQUIRED_META_FIELDS: Tuple[Field, ...] = (Field.TITLE, Field.START_TIME, Field.END_TIME)

CANDIDATE_CATEGORIES: Tuple[Field, ...] = (Field.REMOVED, Field.EDITED, Field.ADDED)
