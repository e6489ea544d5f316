"""
Metadata block comparison.

Walks the before-side meta keys in insertion order and emits a FieldDiff for
every key whose raw value differs on the after side. Keys that exist only on
the after side are not reported. Time-like keys are reported with both values
re-rendered in the configured offset; equality is still decided on the raw
values, so the same instant written with two different offsets is reported
as a change.
"""

from typing import Any, Dict, List, Optional

from snapshot_diff.config import DEFAULT_CONFIG, DiffConfig
from snapshot_diff.diffing.timestamps import is_time_field, normalize_timestamp
from snapshot_diff.model.tree import json_equal
from snapshot_diff.model.types import FieldDiff
from snapshot_diff.validation.checks import require_meta

_ABSENT = object()


def diff_meta(
    before_meta: Optional[Dict[str, Any]],
    after_meta: Optional[Dict[str, Any]],
    config: DiffConfig = DEFAULT_CONFIG,
) -> List[FieldDiff]:
    """
    Compare two meta blocks.

    Args:
        before_meta: Meta block of the before document
        after_meta: Meta block of the after document
        config: Offset and time-field marker

    Returns:
        List[FieldDiff]: Changed fields in before-side key order

    Raises:
        MissingMetaError: If either block is None
        IncompleteMetaError: If either block lacks title/startTime/endTime
        TimestampParseError: If a changed time-like value cannot be parsed
    """
    before_meta = require_meta(before_meta)
    after_meta = require_meta(after_meta)

    target = config.target_timezone
    result: List[FieldDiff] = []

    for key, before_value in before_meta.items():
        after_value = after_meta.get(key, _ABSENT)
        if after_value is not _ABSENT and json_equal(before_value, after_value):
            continue

        if after_value is _ABSENT:
            after_value = None

        if is_time_field(key, config.time_field_marker):
            before_value = normalize_timestamp(before_value, target, key)
            after_value = normalize_timestamp(after_value, target, key)

        result.append(FieldDiff(field=key, before=before_value, after=after_value))

    return result
