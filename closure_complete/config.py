"""Core data types and configuration for closure-complete."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

DECLARATION_SUFFIX = ".d.ts"
BUILD_OUTPUT_DIRS = ["bazel-bin", "bazel-genfiles"]
SNAPSHOT_NAME = "._closure_namespace_cache.json"


class CompletionKind(IntEnum):
    """Completion item kinds, numbered as in the Language Server Protocol."""
    CLASS = 7
    MODULE = 9


class FileChangeType(IntEnum):
    CREATED = 1
    CHANGED = 2
    DELETED = 3


class LineKind(str, Enum):
    DECLARATION = "declaration"
    MODULE_EXPORT = "module_export"
    DEFAULT_EXPORT = "default_export"
    NONE = "none"


@dataclass(frozen=True)
class ImportInfo:
    """Import metadata for one declared namespace."""
    name: str
    namespace: str
    module: bool
    sourcepath: str

    @classmethod
    def from_namespace(cls, namespace: str, module: bool, sourcepath: str) -> ImportInfo:
        return cls(
            name=namespace.rsplit(".", 1)[-1],
            namespace=namespace,
            module=module,
            sourcepath=sourcepath,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "module": self.module,
            "sourcepath": self.sourcepath,
        }


@dataclass(frozen=True)
class Position:
    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class TextEdit:
    range: Range
    new_text: str

    @classmethod
    def insert(cls, position: Position, text: str) -> TextEdit:
        return cls(range=Range(start=position, end=position), new_text=text)

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "newText": self.new_text}


@dataclass
class CompletionItem:
    """A ready-to-insert import suggestion."""
    label: str
    detail: str
    kind: CompletionKind
    additional_text_edits: list[TextEdit] = field(default_factory=list)
    commit_characters: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "detail": self.detail,
            "kind": int(self.kind),
            "additionalTextEdits": [e.to_dict() for e in self.additional_text_edits],
            "commitCharacters": list(self.commit_characters),
        }


@dataclass
class LineMatch:
    kind: LineKind
    namespace: str | None = None


@dataclass(frozen=True)
class FileChange:
    """A watched-file notification as delivered by the editor."""
    uri: str
    type: FileChangeType


@dataclass
class IndexConfig:
    workspace_root: str | None = None
    declaration_suffix: str = DECLARATION_SUFFIX
    build_output_dirs: list[str] = field(default_factory=lambda: list(BUILD_OUTPUT_DIRS))
    exclude_patterns: list[str] = field(default_factory=list)
    write_snapshot: bool = True
    snapshot_name: str = SNAPSHOT_NAME
    verbose: bool = False
    quiet: bool = False


@dataclass
class ScanSummary:
    root: str = ""
    files_scanned: int = 0
    files_indexed: int = 0
    files_failed: int = 0
    namespaces: int = 0
    duration_ms: float = 0.0
