"""Router entry-point discovery for Next.js style projects."""

from __future__ import annotations

import logging
from pathlib import Path

from next_unused.errors import ConfigurationError
from next_unused.models import RouterType
from next_unused.scanner.file_scanner import FileScanner
from next_unused.scanner.language_map import APP_ROUTER_ENTRY_NAMES

logger = logging.getLogger(__name__)

# Route segments may be called build, out, dist...; only dependencies are pruned
_ROUTER_SKIP_DIRS = ["node_modules", "*/node_modules"]


def find_entry_points(
    router_dir: Path,
    router: RouterType,
    files: list[Path] | None = None,
) -> list[Path]:
    """Return the files the router loads directly.

    The app router loads ``page``, ``layout`` and ``route`` files, except
    those inside private folders (``_name``). The pages router treats every
    source file under its directory as a route.

    When ``files`` (the project-wide discovery result) is given, entries are
    picked from it so they are always graph nodes; otherwise the router
    directory is walked, skipping only dependency folders.

    Raises:
        ConfigurationError: if ``router_dir`` does not exist or holds no
            entry points.
    """
    if not router_dir.is_dir():
        raise ConfigurationError(
            f"The directory {router_dir} does not exist. "
            "Please check your project structure and answers."
        )

    router_dir = router_dir.resolve()
    if files is not None:
        candidates = [p for p in files if p.is_relative_to(router_dir)]
    else:
        candidates = FileScanner(skip_dirs=_ROUTER_SKIP_DIRS).scan_directory(router_dir)

    if router == RouterType.APP:
        entries = [p for p in candidates if _is_app_entry(p, router_dir)]
    else:
        entries = candidates

    if not entries:
        raise ConfigurationError(
            f"No entry points found in {router_dir}. "
            "Please ensure the directory contains the appropriate files."
        )

    logger.debug("found %d %s-router entry points", len(entries), router.value)
    return entries


def _is_app_entry(path: Path, router_dir: Path) -> bool:
    rel = path.relative_to(router_dir)
    if any(part.startswith("_") for part in rel.parts[:-1]):
        return False
    name = path.name.lower()
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return False
    allowed = APP_ROUTER_ENTRY_NAMES.get(stem)
    return allowed is not None and f".{ext}" in allowed
