"""Discover candidate source files under a project root."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from next_unused.models import DEFAULT_SKIP_DIRS
from next_unused.scanner.language_map import is_source_file

logger = logging.getLogger(__name__)


class FileScanner:
    """Lists .js/.jsx/.ts/.tsx files, pruning build and dependency directories.

    Skip patterns match the directory path relative to the scanned root, so
    ``build`` prunes ``<root>/build`` but not a route segment ``app/build``.
    """

    def __init__(self, skip_dirs: list[str] | None = None):
        self.skip_dirs = skip_dirs if skip_dirs is not None else list(DEFAULT_SKIP_DIRS)

    def scan_directory(self, directory: Path) -> list[Path]:
        root = directory.resolve()
        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root):
            rel_dir = Path(dirpath).relative_to(root)
            # prune in place so os.walk never descends into skipped dirs
            dirnames[:] = [
                d for d in dirnames if not self._should_skip((rel_dir / d).as_posix())
            ]
            for name in filenames:
                if not is_source_file(name):
                    continue
                files.append((Path(dirpath) / name).resolve())
        files.sort(key=lambda p: p.as_posix())
        logger.debug("discovered %d source files under %s", len(files), root)
        return files

    def _should_skip(self, rel_path: str) -> bool:
        return any(fnmatch.fnmatchcase(rel_path, pattern) for pattern in self.skip_dirs)


def discover_files(root: Path, skip_dirs: list[str] | None = None) -> list[Path]:
    """All candidate source files under root, sorted, canonical."""
    return FileScanner(skip_dirs=skip_dirs).scan_directory(root)
