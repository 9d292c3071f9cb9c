"""Import engine: owns the namespace index for one workspace session."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from urllib.parse import unquote, urlparse

from closure_complete.config import (
    CompletionItem,
    FileChange,
    FileChangeType,
    IndexConfig,
    Position,
    ScanSummary,
)
from closure_complete.index.completions import CompletionCache
from closure_complete.index.namespace_index import NamespaceIndex
from closure_complete.output import write_snapshot
from closure_complete.scanning.file_scanner import scan_declarations
from closure_complete.scanning.workspace import iter_declaration_files

logger = logging.getLogger(__name__)


def uri_to_path(uri: str) -> str | None:
    """Convert a ``file://`` URI to a local path. Other schemes give None."""
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        return None
    return unquote(parsed.path)


class ImportEngine:
    """Keeps the namespace index and completion cache in step.

    Every event is processed to completion before the next one, so readers
    never see a file half-way through a rescan.
    """

    def __init__(self, config: IndexConfig | None = None) -> None:
        self.config = config or IndexConfig()
        self.index = NamespaceIndex()
        self.cache = CompletionCache()
        self.workspace: str | None = self.config.workspace_root

    def remove_file(self, path: str) -> list[str]:
        """Forget everything the file contributed. No-op for unknown files."""
        removed = self.index.remove_file(path)
        if removed:
            self.cache.invalidate()
        return removed

    def scan_file(self, path: str) -> list[str] | None:
        """Rescan one declaration file, replacing its previous entries.

        Returns the namespaces it now owns, or None when the file could not
        be read (its previous entries are then kept).
        """
        try:
            entries = scan_declarations(path, self.index)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return None

        removed, added = self.index.replace_file(path, entries)
        if removed or added:
            self.cache.invalidate()

        if added:
            logger.info(f"Found {len(added)} namespaces in {path}.")
            if self.workspace and self.config.write_snapshot:
                write_snapshot(self.workspace, self.index.values(), self.config.snapshot_name)
        return added

    def scan_workspace(self, root: str) -> ScanSummary:
        """Index every declaration file under the workspace and its build outputs."""
        logger.info(f"scanning workspace {root}")
        self.workspace = root
        summary = ScanSummary(root=root)
        start = time.monotonic()

        for path in iter_declaration_files(root, self.config):
            summary.files_scanned += 1
            added = self.scan_file(path)
            if added is None:
                summary.files_failed += 1
            elif added:
                summary.files_indexed += 1

        summary.namespaces = len(self.index)
        summary.duration_ms = round((time.monotonic() - start) * 1000, 1)
        return summary

    def get_completions(self) -> list[CompletionItem]:
        return self.cache.get(self.index)

    # ------------------------------------------------------------------
    # Editor-facing events
    # ------------------------------------------------------------------

    def on_workspace_root(self, path: str) -> ScanSummary:
        return self.scan_workspace(path)

    def on_file_changed(self, path: str, change_type: FileChangeType = FileChangeType.CHANGED) -> None:
        if change_type == FileChangeType.DELETED:
            self.remove_file(path)
        else:
            self.scan_file(path)

    def on_files_changed(self, changes: Iterable[FileChange]) -> None:
        """Apply a batch of watched-file notifications, each path at most once."""
        processed: set[str] = set()
        for change in changes:
            try:
                local = uri_to_path(change.uri)
                if local is None:
                    continue
                path = os.path.realpath(local)
            except ValueError as e:
                logger.warning(f"Ignoring change for {change.uri}: {e}")
                continue
            if path in processed:
                continue
            self.on_file_changed(path, change.type)
            processed.add(path)

    def on_completion_requested(self, position: Position | None = None) -> list[CompletionItem]:
        """Completions do not depend on the cursor; ``position`` is ignored."""
        return self.get_completions()
