"""Shared fixtures for building declaration files in temporary workspaces."""

from __future__ import annotations

import pytest


@pytest.fixture()
def write_decl(tmp_path):
    """Write a declaration file under tmp_path and return its real path."""

    def _write(rel_path: str, *blocks: str) -> str:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(blocks), encoding="utf-8")
        return str(path.resolve())

    return _write
