"""
Presence checks run before any diffing.

These are deliberately shallow: a document must be an object, its meta block
must be present and hold title/startTime/endTime, its candidates list must be
present, and every candidate must carry an id. Nothing else about the shape
is validated.

Usage:
    ```python
    from snapshot_diff.validation import check_document

    check_document({"id": 1, "meta": {...}, "candidates": [...]})  # returns None
    check_document({"id": 1, "candidates": []})  # raises MissingMetaError
    ```
"""

from typing import Any, Dict, List

from snapshot_diff.errors import (
    DocumentShapeError,
    IncompleteMetaError,
    MissingCandidateIdError,
    MissingCandidatesError,
    MissingMetaError,
    NullInputError,
)
from snapshot_diff.model.fields import Field, REQUIRED_META_FIELDS
from snapshot_diff.model.tree import expect_array, expect_object, kind_of


def require_document(document: Any, position: str) -> Dict[str, Any]:
    """
    Ensure a top-level document is present and is an object.

    Args:
        document: Parsed document tree
        position: "first" or "second", used in the error message

    Raises:
        NullInputError: If document is None
        DocumentShapeError: If document is not an object
    """
    if document is None:
        raise NullInputError(position)
    return expect_object(document, f"{position} document")


def require_meta(meta: Any) -> Dict[str, Any]:
    """
    Ensure a meta block is present and holds every required field.

    Raises:
        MissingMetaError: If meta is None
        DocumentShapeError: If meta is not an object
        IncompleteMetaError: If title, startTime or endTime is missing
    """
    if meta is None:
        raise MissingMetaError()
    meta = expect_object(meta, Field.META.value)

    missing = [f.value for f in REQUIRED_META_FIELDS if f.value not in meta]
    if missing:
        raise IncompleteMetaError(missing)
    return meta


def require_candidates(candidates: Any) -> List[Dict[str, Any]]:
    """
    Ensure a candidates list is present and every entry is an object with an id.

    Raises:
        MissingCandidatesError: If candidates is None
        DocumentShapeError: If candidates is not an array of objects with integer ids
        MissingCandidateIdError: If an entry has no id key
    """
    if candidates is None:
        raise MissingCandidatesError()
    candidates = expect_array(candidates, Field.CANDIDATES.value)

    for index, candidate in enumerate(candidates):
        expect_object(candidate, f"{Field.CANDIDATES.value}[{index}]")
        if Field.ID.value not in candidate:
            raise MissingCandidateIdError(index)
        candidate_id = candidate[Field.ID.value]
        # bool is an int subclass and would collide with 0/1 in the lookups
        if isinstance(candidate_id, bool) or not isinstance(candidate_id, int):
            raise DocumentShapeError(
                f"{Field.CANDIDATES.value}[{index}].{Field.ID.value}",
                "an integer",
                kind_of(candidate_id).value
            )
    return candidates


def check_document(document: Any, label: str = "document") -> None:
    """Run every presence check on a single document, naming it label in errors."""
    if document is None:
        raise NullInputError(label)
    document = expect_object(document, label)
    require_meta(document.get(Field.META.value))
    require_candidates(document.get(Field.CANDIDATES.value))
