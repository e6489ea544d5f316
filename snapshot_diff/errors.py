"""
Error taxonomy for snapshot diffing.

Every failure is fatal for the diff call that raised it: there is no retry
and no partial result. Callers (the CLI, or any wrapper) catch
SnapshotDiffError and present it to the user.

Hierarchy:
    SnapshotDiffError (ValueError)
    ├── NullInputError: one of the two documents is None
    ├── IdentifierMismatchError: top-level ids differ
    ├── MissingMetaError: a meta block is absent
    ├── IncompleteMetaError: a meta block lacks title/startTime/endTime
    ├── MissingCandidatesError: a candidates list is absent
    ├── MissingCandidateIdError: a candidate has no id
    ├── TimestampParseError: a time-like meta value is not ISO-8601 with offset
    ├── DocumentShapeError: a value has the wrong JSON kind
    └── DocumentLoadError: a document file/text could not be read as JSON
"""

from typing import Any, Optional


class SnapshotDiffError(ValueError):
    """Base class for all errors raised while loading or diffing documents."""

    code = "snapshot_diff_error"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class NullInputError(SnapshotDiffError):
    code = "null_input"

    def __init__(self, position: str):
        super().__init__(f"{position} input json object must not be null")
        self.position = position


class IdentifierMismatchError(SnapshotDiffError):
    code = "identifier_mismatch"

    def __init__(self, before_id: Any, after_id: Any):
        super().__init__("json objects have different identifiers", path="id")
        self.before_id = before_id
        self.after_id = after_id


class MissingMetaError(SnapshotDiffError):
    code = "missing_meta"

    def __init__(self):
        super().__init__("meta field is missed", path="meta")


class IncompleteMetaError(SnapshotDiffError):
    code = "incomplete_meta"

    def __init__(self, missing_fields):
        super().__init__("meta data has missed fields", path="meta")
        self.missing_fields = list(missing_fields)


class MissingCandidatesError(SnapshotDiffError):
    code = "missing_candidates"

    def __init__(self):
        super().__init__("candidates field is missed", path="candidates")


class MissingCandidateIdError(SnapshotDiffError):
    code = "missing_candidate_id"

    def __init__(self, index: int):
        super().__init__(
            f"candidate at position {index} has no id",
            path=f"candidates[{index}].id"
        )
        self.index = index


class TimestampParseError(SnapshotDiffError):
    code = "timestamp_parse"

    def __init__(self, value: Any, field: Optional[str] = None):
        super().__init__(
            f"cannot parse {value!r} as an ISO-8601 date-time with offset",
            path=f"meta.{field}" if field else None
        )
        self.value = value
        self.field = field


class DocumentShapeError(SnapshotDiffError):
    code = "document_shape"

    def __init__(self, path: str, expected: str, actual: str):
        super().__init__(f"{path} must be {expected}, got {actual}", path=path)
        self.expected = expected
        self.actual = actual


class DocumentLoadError(SnapshotDiffError):
    code = "document_load"
