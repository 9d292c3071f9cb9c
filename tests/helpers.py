"""Builders for clutz-style declaration text used across tests."""

from __future__ import annotations


def declaration(namespace: str, module: bool = False) -> str:
    """Render a ``declare module`` block for one namespace."""
    marker = "export = alias;" if module else "export default alias;"
    return (
        f"declare module 'goog:{namespace}' {{\n"
        f"  import alias = ಠ_ಠ.clutz.{namespace};\n"
        f"  {marker}\n"
        f"}}\n"
    )
