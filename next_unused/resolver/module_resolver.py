"""Resolve module specifiers to project-internal files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from next_unused.models import AliasConfig
from next_unused.resolver.alias_config import match_alias
from next_unused.scanner.language_map import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


class ModuleResolver:
    """Turns a raw specifier into an absolute file path inside the project.

    Resolution order per candidate: exact file, file + extension, then
    ``index`` + extension inside a directory. Misses return ``None`` and are
    expected (third-party packages, type-only modules, assets).
    """

    def __init__(
        self,
        project_root: Path,
        alias_config: AliasConfig | None = None,
        extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
    ):
        self.project_root = project_root.resolve()
        self.alias_config = alias_config or AliasConfig()
        self.extensions = extensions

    def resolve(self, specifier: str, from_file: Path) -> Path | None:
        if not specifier:
            return None
        for candidate in self._candidates(specifier, from_file):
            resolved = self._resolve_candidate(candidate)
            if resolved is None:
                continue
            if not resolved.is_relative_to(self.project_root):
                logger.debug("%r from %s resolves outside the project", specifier, from_file)
                return None
            return resolved
        if not _is_path_like(specifier) and self._find_package(specifier, from_file.parent):
            logger.debug("%r is an external package", specifier)
        else:
            logger.debug("unresolved %r from %s", specifier, from_file)
        return None

    def _candidates(self, specifier: str, from_file: Path) -> Iterator[Path]:
        base_url = self.alias_config.base_url or self.project_root

        for target in match_alias(specifier, self.alias_config.paths):
            yield _normalize(base_url / target)

        if _is_path_like(specifier):
            yield _normalize(from_file.parent / specifier)
            return

        if self.alias_config.base_url is not None:
            yield _normalize(self.alias_config.base_url / specifier)

    def _resolve_candidate(self, candidate: Path) -> Path | None:
        # Over-long names and similar OS errors count as a miss
        try:
            if candidate.is_file():
                return candidate.resolve()
            for ext in self.extensions:
                with_ext = Path(f"{candidate}{ext}")
                if with_ext.is_file():
                    return with_ext.resolve()
            if candidate.is_dir():
                for ext in self.extensions:
                    index = candidate / f"index{ext}"
                    if index.is_file():
                        return index.resolve()
        except OSError as e:
            logger.debug("cannot stat %s: %s", candidate, e)
        return None

    @staticmethod
    def _find_package(specifier: str, start_dir: Path) -> Path | None:
        """Walk ancestor directories looking for node_modules/<package>."""
        parts = specifier.split("/")
        if specifier.startswith("@") and len(parts) > 1:
            package = "/".join(parts[:2])
        else:
            package = parts[0]
        for directory in (start_dir, *start_dir.parents):
            candidate = directory / "node_modules" / package
            try:
                if candidate.exists():
                    return candidate
            except OSError:
                return None
        return None


def _is_path_like(specifier: str) -> bool:
    return (
        specifier in (".", "..")
        or specifier.startswith(("./", "../", "/"))
    )


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(path))
