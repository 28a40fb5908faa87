"""File and entry-point discovery."""

from __future__ import annotations

from next_unused.scanner.entry_points import find_entry_points
from next_unused.scanner.file_scanner import DEFAULT_SKIP_DIRS, FileScanner, discover_files

__all__ = [
    "DEFAULT_SKIP_DIRS",
    "FileScanner",
    "discover_files",
    "find_entry_points",
]
