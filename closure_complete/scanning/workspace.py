"""Discovery of declaration files under a workspace."""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator

from closure_complete.config import IndexConfig

logger = logging.getLogger(__name__)

IGNORED_DIR_RE = re.compile(r"^(\.git|node_modules|.+\.runfiles)$")


def _should_ignore(name: str, exclude_patterns: list[str]) -> bool:
    """Check if a directory name matches ignore patterns."""
    if IGNORED_DIR_RE.match(name):
        return True
    return any(fnmatch.fnmatch(name, pattern) for pattern in exclude_patterns)


def scan_roots(root: str, config: IndexConfig) -> list[str]:
    """The workspace root followed by its build output directories."""
    return [root] + [os.path.join(root, d) for d in config.build_output_dirs]


def iter_declaration_files(root: str, config: IndexConfig) -> Iterator[str]:
    """Yield the real path of every declaration file under the scan roots.

    Directory symlinks below a root are not followed; the build output
    directories, usually symlinks themselves, are walked as roots of
    their own. Each real path is yielded once, even when a build output
    directory lies inside the workspace or several links reach one file.
    """
    seen: set[str] = set()
    for top in scan_roots(root, config):
        if not os.path.isdir(top):
            logger.debug(f"skipping missing scan root {top}")
            continue

        for dirpath, dirnames, filenames in os.walk(top, onerror=_log_walk_error):
            # Filter ignored directories in-place
            dirnames[:] = [
                d for d in sorted(dirnames)
                if not _should_ignore(d, config.exclude_patterns)
            ]

            for filename in sorted(filenames):
                if not filename.endswith(config.declaration_suffix):
                    continue
                path = os.path.realpath(os.path.join(dirpath, filename))
                if path in seen:
                    continue
                seen.add(path)
                yield path


def _log_walk_error(error: OSError) -> None:
    logger.debug(f"cannot list {error.filename}: {error}")
