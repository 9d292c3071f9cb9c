"""Extraction of namespace declarations from a single declaration file."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from closure_complete.config import ImportInfo, LineKind
from closure_complete.index.namespace_index import NamespaceIndex
from closure_complete.scanning.classifier import classify_line
from closure_complete.scanning.filters import FilterState, admit_namespace

logger = logging.getLogger(__name__)


def read_lines(path: str) -> Iterator[str]:
    """Lazily yield the lines of a UTF-8 text file without line endings."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")


def extract_imports(
    lines: Iterable[str], path: str, index: NamespaceIndex,
) -> list[ImportInfo]:
    """Run lines through the classifier and filters, collecting new imports.

    A declaration is closed by the first export marker that follows it;
    later markers for the same namespace are ignored. Namespaces owned by
    another file are skipped. The index itself is not modified.
    """
    state = FilterState()
    namespace = ""
    found: list[ImportInfo] = []
    seen: set[str] = set()

    for line in lines:
        match = classify_line(line)

        if match.kind == LineKind.DECLARATION:
            namespace = match.namespace if admit_namespace(match.namespace, state) else ""
            continue

        if not namespace or match.kind == LineKind.NONE:
            continue

        if namespace in seen or not index.can_claim(namespace, path):
            continue

        found.append(ImportInfo.from_namespace(
            namespace,
            module=match.kind == LineKind.MODULE_EXPORT,
            sourcepath=path,
        ))
        seen.add(namespace)

    return found


def scan_declarations(path: str, index: NamespaceIndex) -> list[ImportInfo]:
    """Scan one declaration file. Raises OSError / UnicodeDecodeError on read failure."""
    logger.debug(f"scanning {path}")
    return extract_imports(read_lines(path), path, index)
