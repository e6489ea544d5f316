"""
Unit tests for the diff engine.
"""

import copy

import pytest
from snapshot_diff import (
    DiffConfig,
    DiffEngine,
    DocumentShapeError,
    IdentifierMismatchError,
    IncompleteMetaError,
    MissingCandidatesError,
    MissingMetaError,
    NullInputError,
    diff,
)


@pytest.fixture
def document():
    """A valid snapshot document."""
    return {
        "id": 7,
        "meta": {
            "title": "A",
            "startTime": "2023-01-01T10:00:00+00:00",
            "endTime": "2023-01-01T12:00:00+00:00",
        },
        "candidates": [{"id": 1, "x": "a"}, {"id": 2, "x": "b"}],
    }


class TestDiff:
    """Test result construction."""

    def test_identical_documents_give_empty_result(self, document):
        """Test that diff(X, X) is empty."""
        assert diff(document, document) == {}
        assert diff(document, copy.deepcopy(document)) == {}

    def test_meta_only_change(self, document):
        """Test that only the meta section appears."""
        after = copy.deepcopy(document)
        after["meta"]["title"] = "B"

        assert diff(document, after) == {
            "meta": [{"field": "title", "before": "A", "after": "B"}]
        }

    def test_candidates_only_change(self, document):
        """Test that only the candidates section appears."""
        after = copy.deepcopy(document)
        after["candidates"] = [{"id": 1, "x": "a"}, {"id": 3, "x": "c"}]

        assert diff(document, after) == {
            "candidates": {"removed": [{"id": 2}], "added": [{"id": 3}]}
        }

    def test_both_sections(self, document):
        """Test a result with both sections, meta first."""
        after = copy.deepcopy(document)
        after["meta"]["startTime"] = "2023-01-01T09:00:00+00:00"
        after["candidates"][0]["x"] = "z"

        result = diff(document, after)

        assert list(result) == ["meta", "candidates"]
        assert result["meta"] == [{
            "field": "startTime",
            "before": "2023-01-01T12:00:00+02",
            "after": "2023-01-01T11:00:00+02",
        }]
        assert result["candidates"] == {"edited": [{"id": 1}]}

    def test_extra_top_level_keys_ignored(self, document):
        """Test that only id, meta and candidates are looked at."""
        after = copy.deepcopy(document)
        after["owner"] = "someone else"
        assert diff(document, after) == {}

    def test_engine_with_config(self, document):
        """Test an engine instance with a custom offset."""
        after = copy.deepcopy(document)
        after["meta"]["endTime"] = "2023-01-01T13:00:00+00:00"

        engine = DiffEngine(DiffConfig(target_offset_hours=-3))
        result = engine.diff(document, after)

        assert result["meta"][0]["after"] == "2023-01-01T10:00:00-03"

    def test_inputs_not_mutated(self, document):
        """Test that diffing leaves the inputs untouched."""
        after = copy.deepcopy(document)
        after["meta"]["title"] = "B"
        snapshot = (copy.deepcopy(document), copy.deepcopy(after))

        diff(document, after)

        assert (document, after) == snapshot


class TestValidationOrder:
    """Test which error wins when several apply."""

    def test_first_document_none(self, document):
        """Test None first input."""
        with pytest.raises(NullInputError) as exc_info:
            diff(None, document)
        assert str(exc_info.value) == "first input json object must not be null"

    def test_second_document_none(self, document):
        """Test None second input."""
        with pytest.raises(NullInputError) as exc_info:
            diff(document, None)
        assert str(exc_info.value) == "second input json object must not be null"

    def test_document_not_an_object(self, document):
        """Test a top-level array."""
        with pytest.raises(DocumentShapeError):
            diff([document], document)

    def test_identifier_mismatch(self, document):
        """Test different ids."""
        other = copy.deepcopy(document)
        other["id"] = 8

        with pytest.raises(IdentifierMismatchError) as exc_info:
            diff(document, other)

        assert str(exc_info.value) == "json objects have different identifiers"
        assert (exc_info.value.before_id, exc_info.value.after_id) == (7, 8)

    def test_identifier_checked_before_meta(self, document):
        """Test that the id check runs before meta validation."""
        other = {"id": 8}
        with pytest.raises(IdentifierMismatchError):
            diff(document, other)

    def test_identifier_is_strict(self, document):
        """Test that 7 and 7.0 or "7" are different ids."""
        for other_id in (7.0, "7"):
            other = copy.deepcopy(document)
            other["id"] = other_id
            with pytest.raises(IdentifierMismatchError):
                diff(document, other)

    def test_missing_meta(self, document):
        """Test an absent meta block."""
        other = copy.deepcopy(document)
        del other["meta"]
        with pytest.raises(MissingMetaError):
            diff(document, other)

    def test_incomplete_meta(self, document):
        """Test a meta block without title."""
        other = copy.deepcopy(document)
        del other["meta"]["title"]
        with pytest.raises(IncompleteMetaError, match="meta data has missed fields"):
            diff(other, document)

    def test_missing_candidates(self, document):
        """Test an absent candidates list."""
        other = copy.deepcopy(document)
        del other["candidates"]
        with pytest.raises(MissingCandidatesError):
            diff(document, other)
