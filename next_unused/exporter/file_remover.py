"""Delete unused files from disk."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def delete_files(paths: list[Path]) -> list[Path]:
    """Unlink each path; returns the ones actually removed.

    A file that cannot be removed is logged and skipped.
    """
    deleted: list[Path] = []
    for path in paths:
        try:
            path.unlink()
        except OSError as e:
            logger.warning("could not delete %s: %s", path, e)
            continue
        deleted.append(path)
    return deleted
