"""JSON serialisation of the index snapshot and completion lists."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from closure_complete.config import CompletionItem, ImportInfo

logger = logging.getLogger(__name__)


def snapshot_path(workspace: str, snapshot_name: str) -> Path:
    return Path(workspace) / snapshot_name


def write_snapshot(workspace: str, imports: list[ImportInfo], snapshot_name: str) -> bool:
    """Write the current index entries for external inspection.

    Best effort: failures are logged and reported as ``False``.
    """
    path = snapshot_path(workspace, snapshot_name)
    try:
        path.write_text(json.dumps([i.to_dict() for i in imports]), encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to write namespace cache {path}: {e}")
        return False
    return True


def write_completions(items: list[CompletionItem], output_path: str) -> None:
    """Write a completion list to a JSON file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([item.to_dict() for item in items], f, indent=2)
