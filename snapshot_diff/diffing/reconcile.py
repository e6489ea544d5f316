"""
Reconcile two keyed collections into removed/edited/added groups.

Two passes, each driven by a key lookup built over the opposite collection:

    1. Walk `before` in order. A key missing from the after-lookup is
       "removed"; a key present whose pair is_changed() is "edited".
    2. Walk `after` in order. A key missing from the before-lookup is "added".

Groups appear in the returned dict in first-occurrence order and only when
non-empty. Lookups are plain dicts, so when a key repeats within one
collection the last occurrence wins and earlier duplicates are compared
against it.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, TypeVar

from snapshot_diff.model.fields import Field

T = TypeVar("T")

REMOVED = Field.REMOVED.value
EDITED = Field.EDITED.value
ADDED = Field.ADDED.value


def index_by_key(items: Iterable[T], key_of: Callable[[T], Hashable]) -> Dict[Hashable, T]:
    """Build a key -> item lookup; later items overwrite earlier ones."""
    return {key_of(item): item for item in items}


def reconcile_by_key(
    before: List[T],
    after: List[T],
    key_of: Callable[[T], Hashable],
    is_changed: Callable[[T, T], bool],
) -> Dict[str, List[Any]]:
    """
    Classify keys of two collections as removed, edited or added.

    Args:
        before: Items of the before side, in order
        after: Items of the after side, in order
        key_of: Extracts the identifying key of an item
        is_changed: Called with (before_item, after_item) for matched keys

    Returns:
        Dict mapping "removed"/"edited"/"added" to the keys in scan order.
        Empty groups are omitted.

    Example:
        ```python
        reconcile_by_key(
            [{"id": 1}, {"id": 2}],
            [{"id": 1}, {"id": 3}],
            key_of=lambda c: c["id"],
            is_changed=lambda a, b: a != b,
        )
        # {"removed": [2], "added": [3]}
        ```
    """
    groups: Dict[str, List[Any]] = {}

    after_by_key = index_by_key(after, key_of)
    for item in before:
        key = key_of(item)
        if key not in after_by_key:
            groups.setdefault(REMOVED, []).append(key)
        elif is_changed(item, after_by_key[key]):
            groups.setdefault(EDITED, []).append(key)

    before_by_key = index_by_key(before, key_of)
    for item in after:
        key = key_of(item)
        if key not in before_by_key:
            groups.setdefault(ADDED, []).append(key)

    return groups
