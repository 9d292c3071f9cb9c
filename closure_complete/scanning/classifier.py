"""Single-line classification of declaration file content."""

from __future__ import annotations

import re

from closure_complete.config import LineKind, LineMatch

DECLARATION_RE = re.compile(r"declare module 'goog:(.+)'")
MODULE_EXPORT_MARKER = "export = alias"
DEFAULT_EXPORT_MARKER = "export default alias"


def classify_line(line: str) -> LineMatch:
    """Classify one line as a declaration start, an export marker, or nothing."""
    match = DECLARATION_RE.search(line)
    if match:
        return LineMatch(LineKind.DECLARATION, match.group(1))
    if MODULE_EXPORT_MARKER in line:
        return LineMatch(LineKind.MODULE_EXPORT)
    if DEFAULT_EXPORT_MARKER in line:
        return LineMatch(LineKind.DEFAULT_EXPORT)
    return LineMatch(LineKind.NONE)
