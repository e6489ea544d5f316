"""
Utility functions and helpers.

Components:
    - documents: JSON file/text loading and result serialization
    - logging: Logging configuration with a Rich handler

Example:
    ```python
    from snapshot_diff.utils import load_document, dump_result

    before = load_document("before.json")
    after = load_document("after.json")
    print(dump_result(diff(before, after)))
    ```
"""

from snapshot_diff.utils.documents import load_document, parse_document, dump_result, save_result

__all__ = ["load_document", "parse_document", "dump_result", "save_result"]
