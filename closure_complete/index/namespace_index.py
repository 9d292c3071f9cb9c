"""Namespace-to-import index with per-file ownership tracking."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from closure_complete.config import ImportInfo

logger = logging.getLogger(__name__)


class NamespaceIndex:
    """Maps namespaces to import metadata and tracks which file supplied each.

    imports: namespace -> ImportInfo
    file_to_ns: file_path -> namespaces that file currently owns

    The first file to claim a namespace owns it until that file is removed.
    Removing the owner drops the namespace even if another file also
    declares it; the other file only regains it on its next scan.
    """

    def __init__(self) -> None:
        self.imports: dict[str, ImportInfo] = {}
        self.file_to_ns: dict[str, list[str]] = {}

    def __contains__(self, namespace: str) -> bool:
        return namespace in self.imports

    def __len__(self) -> int:
        return len(self.imports)

    def get(self, namespace: str) -> ImportInfo | None:
        return self.imports.get(namespace)

    def values(self) -> list[ImportInfo]:
        return list(self.imports.values())

    def owner(self, namespace: str) -> str | None:
        """Return the path of the file that owns the namespace."""
        info = self.imports.get(namespace)
        return info.sourcepath if info else None

    def get_namespaces_for_file(self, file_path: str) -> list[str]:
        return self.file_to_ns.get(file_path, [])

    def can_claim(self, namespace: str, file_path: str) -> bool:
        """First-claim ownership check.

        A file may claim a namespace nobody owns, or one it already owns
        (a rescan of the owner replaces its own entries).
        """
        owner = self.owner(namespace)
        return owner is None or owner == file_path

    def remove_file(self, file_path: str) -> list[str]:
        """Drop every namespace the file owns. Returns the removed namespaces."""
        namespaces = self.file_to_ns.pop(file_path, None)
        if namespaces is None:
            return []
        logger.info(f"removing imports from {file_path}")
        for ns in namespaces:
            del self.imports[ns]
        return namespaces

    def add_file(self, file_path: str, entries: Iterable[ImportInfo]) -> list[str]:
        """Register entries sourced from ``file_path``. Returns the added namespaces.

        Entries whose namespace is already owned by another file are skipped.
        The reverse row is only created when something was added.
        """
        added: list[str] = []
        for info in entries:
            if info.sourcepath != file_path:
                raise ValueError(f"{info.namespace} is sourced from {info.sourcepath}, not {file_path}")
            if not self.can_claim(info.namespace, file_path):
                continue
            if info.namespace in added:
                continue
            self.imports[info.namespace] = info
            added.append(info.namespace)

        if added:
            owned = self.file_to_ns.setdefault(file_path, [])
            for ns in added:
                if ns not in owned:
                    owned.append(ns)
        return added

    def replace_file(self, file_path: str, entries: Iterable[ImportInfo]) -> tuple[list[str], list[str]]:
        """Remove the file's previous entries, then add ``entries``.

        Returns ``(removed, added)``.
        """
        entries = list(entries)
        removed = self.remove_file(file_path)
        added = self.add_file(file_path, entries)
        return removed, added
