"""
Error formatter - convert diff errors to user-friendly messages.

This module provides utilities for formatting SnapshotDiffError instances in a
way that helps users understand what went wrong and how to fix their input.
"""

from snapshot_diff.errors import (
    DocumentLoadError,
    DocumentShapeError,
    IdentifierMismatchError,
    IncompleteMetaError,
    MissingCandidateIdError,
    MissingCandidatesError,
    MissingMetaError,
    NullInputError,
    SnapshotDiffError,
    TimestampParseError,
)


def format_error(error: SnapshotDiffError) -> str:
    """
    Format an error with its code and location.

    Args:
        error: Error raised while loading or diffing

    Returns:
        str: Multi-line description
    """
    lines = [f"Error [{error.code}]: {error.message}"]

    if error.path:
        lines.append(f"   At: {error.path}")

    if isinstance(error, IdentifierMismatchError):
        lines.append(f"   Before id: {error.before_id!r}")
        lines.append(f"   After id: {error.after_id!r}")
    elif isinstance(error, IncompleteMetaError):
        lines.append(f"   Missing: {', '.join(error.missing_fields)}")

    return "\n".join(lines)


def suggest_fix(error: SnapshotDiffError) -> str:
    """
    Suggest how to fix an error.

    Args:
        error: Error raised while loading or diffing

    Returns:
        str: Suggested fix
    """
    if isinstance(error, NullInputError):
        return f"Provide the {error.position} document"

    elif isinstance(error, IdentifierMismatchError):
        return "Compare two snapshots of the same entity (matching 'id')"

    elif isinstance(error, MissingMetaError):
        return "Add a 'meta' object to both documents"

    elif isinstance(error, IncompleteMetaError):
        return f"Add {', '.join(repr(f) for f in error.missing_fields)} to the 'meta' object"

    elif isinstance(error, MissingCandidatesError):
        return "Add a 'candidates' array to both documents (it may be empty)"

    elif isinstance(error, MissingCandidateIdError):
        return f"Give candidate #{error.index} an 'id'"

    elif isinstance(error, TimestampParseError):
        return "Use ISO-8601 with an offset, e.g. 2023-01-01T10:00:00+00:00"

    elif isinstance(error, DocumentShapeError):
        return f"Change {error.path} to {error.expected}"

    elif isinstance(error, DocumentLoadError):
        return "Check that the file exists and contains valid JSON"

    else:
        return "Check the input documents"
