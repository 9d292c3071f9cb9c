"""Suggestion generation from the namespace index."""

from __future__ import annotations

import logging

from closure_complete.config import CompletionItem, CompletionKind, ImportInfo, Position, TextEdit
from closure_complete.index.namespace_index import NamespaceIndex
from closure_complete.prebaked import PREBAKED_CLOSURE, SENTINEL_NAMESPACE

logger = logging.getLogger(__name__)

COMMIT_CHARACTERS = ["."]


def import_statement(info: ImportInfo) -> str:
    module = "* as " if info.module else ""
    return f"import {module}{info.name} from 'goog:{info.namespace}';\n"


def build_completion(info: ImportInfo) -> CompletionItem:
    return CompletionItem(
        label=info.name,
        detail=f"Auto import {info.namespace}",
        kind=CompletionKind.MODULE if info.module else CompletionKind.CLASS,
        additional_text_edits=[TextEdit.insert(Position(0, 0), import_statement(info))],
        commit_characters=list(COMMIT_CHARACTERS),
    )


def build_completions(index: NamespaceIndex) -> list[CompletionItem]:
    """Build one suggestion per indexed namespace, plus the fallback set if needed."""
    imports = index.values()
    if SENTINEL_NAMESPACE not in index:
        imports.extend(PREBAKED_CLOSURE)
    return [build_completion(info) for info in imports]


class CompletionCache:
    """Either valid (holding the last built list) or invalid."""

    def __init__(self) -> None:
        self._items: list[CompletionItem] | None = None

    @property
    def valid(self) -> bool:
        return self._items is not None

    def invalidate(self) -> None:
        self._items = None

    def get(self, index: NamespaceIndex) -> list[CompletionItem]:
        """Return the cached list, rebuilding it from ``index`` when invalid."""
        if self._items is None:
            logger.info(f"Generating {len(index)} completions.")
            self._items = build_completions(index)
        return self._items
