"""
Loading documents and serializing diff results.

The diff core works on in-memory trees only; this module is the boundary
that turns JSON files and text into those trees and back.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from snapshot_diff.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def parse_document(text: str, source: str = "<text>") -> Any:
    """
    Parse JSON text into a document tree.

    Args:
        text: JSON text
        source: Name used in error messages

    Returns:
        Parsed tree (object key order is preserved)

    Raises:
        DocumentLoadError: If text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"Invalid JSON in {source}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e


def load_document(path: Union[str, Path]) -> Any:
    """
    Load a document tree from a UTF-8 JSON file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or not valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise DocumentLoadError(f"Document file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e

    document = parse_document(text, source=str(path))
    logger.debug(f"Loaded document from {path}")
    return document


def dump_result(result: Dict[str, Any], indent: int = 2) -> str:
    """Serialize a diff result as JSON text, keeping key order."""
    return json.dumps(result, indent=indent if indent > 0 else None, ensure_ascii=False)


def save_result(result: Dict[str, Any], path: Union[str, Path], indent: int = 2) -> None:
    """Write a diff result to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_result(result, indent) + "\n", encoding="utf-8")
    logger.info(f"Saved diff to {path}")
