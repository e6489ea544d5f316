"""
Unit tests for the document tree helpers.
"""

import pytest
from snapshot_diff.errors import DocumentShapeError
from snapshot_diff.model.tree import JsonKind, kind_of, expect_object, expect_array, json_equal


class TestKindOf:
    """Test classification of JSON values."""

    def test_scalars(self):
        """Test each scalar kind."""
        assert kind_of(None) is JsonKind.NULL
        assert kind_of(True) is JsonKind.BOOLEAN
        assert kind_of(3) is JsonKind.NUMBER
        assert kind_of(2.5) is JsonKind.NUMBER
        assert kind_of("x") is JsonKind.STRING

    def test_containers(self):
        """Test objects and arrays."""
        assert kind_of({}) is JsonKind.OBJECT
        assert kind_of([]) is JsonKind.ARRAY

    def test_non_json_value(self):
        """Test that non-JSON values are rejected."""
        with pytest.raises(TypeError):
            kind_of(object())


class TestAccessors:
    """Test typed accessors."""

    def test_expect_object_passes_through(self):
        """Test that objects are returned unchanged."""
        value = {"a": 1}
        assert expect_object(value, "meta") is value

    def test_expect_object_rejects_array(self):
        """Test shape mismatch error names the location and kinds."""
        with pytest.raises(DocumentShapeError) as exc_info:
            expect_object([1, 2], "meta")

        assert exc_info.value.path == "meta"
        assert "must be object, got array" in str(exc_info.value)

    def test_expect_array_rejects_string(self):
        """Test that strings are not accepted as arrays."""
        with pytest.raises(DocumentShapeError):
            expect_array("abc", "candidates")


class TestJsonEqual:
    """Test structural equality."""

    def test_booleans_are_not_numbers(self):
        """Test that True does not equal 1."""
        assert json_equal(True, 1) is False
        assert json_equal(0, False) is False

    def test_int_and_float_compare_numerically(self):
        """Test numeric comparison across int and float."""
        assert json_equal(1, 1.0) is True
        assert json_equal(1, 1.5) is False

    def test_objects_ignore_key_order(self):
        """Test that key order does not matter."""
        assert json_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1}) is True

    def test_objects_with_different_keys(self):
        """Test objects with different key sets."""
        assert json_equal({"a": 1}, {"a": 1, "b": None}) is False

    def test_arrays_are_ordered(self):
        """Test that arrays compare element-wise in order."""
        assert json_equal([1, 2], [2, 1]) is False
        assert json_equal([1, {"x": "y"}], [1, {"x": "y"}]) is True

    def test_null(self):
        """Test null only equals null."""
        assert json_equal(None, None) is True
        assert json_equal(None, "") is False
