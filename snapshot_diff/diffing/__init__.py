"""
Diffing algorithms.

Components:
    - meta_differ: Field-by-field comparison of the meta block
    - candidate_differ: Removed/edited/added classification of candidates
    - reconcile: Generic two-pass reconcile-by-key helper
    - timestamps: Time-field predicate, ISO-8601 offset parsing and rendering
"""

from snapshot_diff.diffing.meta_differ import diff_meta
from snapshot_diff.diffing.candidate_differ import diff_candidates, has_different_field_values
from snapshot_diff.diffing.reconcile import reconcile_by_key, index_by_key
from snapshot_diff.diffing.timestamps import (
    is_time_field,
    parse_offset_datetime,
    format_in_offset,
    normalize_timestamp,
)

__all__ = [
    "diff_meta",
    "diff_candidates",
    "has_different_field_values",
    "reconcile_by_key",
    "index_by_key",
    "is_time_field",
    "parse_offset_datetime",
    "format_in_offset",
    "normalize_timestamp",
]
