"""
Candidate list reconciliation.

Candidates are matched by id. A before-candidate with no after match is
removed; one whose own fields differ from its match is edited; an
after-candidate with no before match is added. Only the before-candidate's
keys are compared, so a field that appears only on the after side does not
make a candidate edited.
"""

from typing import Any, Dict, List, Optional

from snapshot_diff.diffing.reconcile import reconcile_by_key
from snapshot_diff.model.fields import Field
from snapshot_diff.model.tree import json_equal
from snapshot_diff.model.types import IdRow
from snapshot_diff.validation.checks import require_candidates

_ABSENT = object()


def _candidate_id(candidate: Dict[str, Any]) -> Any:
    return candidate[Field.ID.value]


def has_different_field_values(before: Dict[str, Any], after: Dict[str, Any]) -> bool:
    """Return True if any key of before is missing from after or holds another value."""
    for key, value in before.items():
        other = after.get(key, _ABSENT)
        if other is _ABSENT or not json_equal(value, other):
            return True
    return False


def diff_candidates(
    before_candidates: Optional[List[Dict[str, Any]]],
    after_candidates: Optional[List[Dict[str, Any]]],
) -> Dict[str, List[IdRow]]:
    """
    Compare two candidate lists by id.

    Args:
        before_candidates: Candidates of the before document
        after_candidates: Candidates of the after document

    Returns:
        Dict with any of "removed", "edited", "added" mapping to IdRows in
        scan order. Categories without entries are omitted.

    Raises:
        MissingCandidatesError: If either list is None
        MissingCandidateIdError: If a candidate has no id
    """
    before_candidates = require_candidates(before_candidates)
    after_candidates = require_candidates(after_candidates)

    groups = reconcile_by_key(
        before_candidates,
        after_candidates,
        key_of=_candidate_id,
        is_changed=has_different_field_values,
    )

    return {category: [IdRow(key) for key in keys] for category, keys in groups.items()}
