"""
Unit tests for document presence checks and error formatting.
"""

import pytest
from snapshot_diff.errors import (
    DocumentShapeError,
    DocumentLoadError,
    IdentifierMismatchError,
    IncompleteMetaError,
    MissingCandidateIdError,
    MissingMetaError,
    SnapshotDiffError,
)
from snapshot_diff.validation import check_document, format_error, suggest_fix


VALID = {
    "id": 1,
    "meta": {"title": "T", "startTime": "2023-01-01T10:00:00Z", "endTime": "2023-01-01T11:00:00Z"},
    "candidates": [{"id": 1}],
}


class TestCheckDocument:
    """Test single-document checks."""

    def test_valid_document(self):
        """Test a document that passes."""
        assert check_document(VALID) is None

    def test_missing_meta(self):
        """Test a document without meta."""
        with pytest.raises(MissingMetaError):
            check_document({"id": 1, "candidates": []})

    def test_non_object_document_uses_label(self):
        """Test that errors name the single document, not a first/second input."""
        with pytest.raises(DocumentShapeError) as exc_info:
            check_document([VALID])

        assert exc_info.value.path == "document"
        assert str(exc_info.value) == "document must be object, got array"

    def test_custom_label(self):
        """Test a caller-supplied label."""
        with pytest.raises(DocumentShapeError, match="^before.json must be object"):
            check_document("x", label="before.json")

    def test_missing_candidate_id(self):
        """Test a candidate without id."""
        document = dict(VALID, candidates=[{"id": 1}, {"name": "x"}])
        with pytest.raises(MissingCandidateIdError):
            check_document(document)

    def test_errors_are_value_errors(self):
        """Test the base class of the taxonomy."""
        with pytest.raises(ValueError):
            check_document({"id": 1})


class TestErrorFormatter:
    """Test user-facing error messages."""

    def test_format_includes_code_and_path(self):
        """Test the common lines."""
        formatted = format_error(IncompleteMetaError(["title"]))

        assert "incomplete_meta" in formatted
        assert "meta data has missed fields" in formatted
        assert "At: meta" in formatted
        assert "Missing: title" in formatted

    def test_format_identifier_mismatch(self):
        """Test that both ids are shown."""
        formatted = format_error(IdentifierMismatchError(1, 2))
        assert "Before id: 1" in formatted
        assert "After id: 2" in formatted

    def test_suggest_fix(self):
        """Test suggestions for several errors."""
        assert "'title'" in suggest_fix(IncompleteMetaError(["title"]))
        assert "'meta'" in suggest_fix(MissingMetaError())
        assert "valid JSON" in suggest_fix(DocumentLoadError("boom"))
        assert suggest_fix(SnapshotDiffError("other")) == "Check the input documents"
