"""
High-level Python API for snapshot-diff.

This module provides the main user-facing API for diffing snapshot documents.
"""

from snapshot_diff.config import DiffConfig
from snapshot_diff.engine import DiffEngine, diff

# Re-export for convenience
__all__ = ["DiffEngine", "DiffConfig", "diff"]
