"""
Rows emitted into a diff result.

Both row types are immutable and convert to the plain JSON tree shape the
result carries via to_dict().
"""

from dataclasses import dataclass
from typing import Any, Dict

from snapshot_diff.model.fields import Field


@dataclass(frozen=True)
class FieldDiff:
    """
    A changed metadata field.

    Attributes:
        field: Metadata key name
        before: Value on the before side (rendered if time-like)
        after: Value on the after side (rendered if time-like, None if absent)
    """
    field: str
    before: Any
    after: Any

    def to_dict(self) -> Dict[str, Any]:
        return {
            Field.FIELD.value: self.field,
            Field.BEFORE.value: self.before,
            Field.AFTER.value: self.after,
        }


@dataclass(frozen=True)
class IdRow:
    """A reference to a candidate by id only."""
    id: Any

    def to_dict(self) -> Dict[str, Any]:
        return {Field.ID.value: self.id}
