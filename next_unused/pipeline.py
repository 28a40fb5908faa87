"""Pipeline orchestrator: validate -> discover -> graph -> reachability."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from next_unused.analysis import DependencyGraphBuilder, find_reachable, find_unused
from next_unused.errors import ConfigurationError
from next_unused.models import AliasConfig, AnalysisConfig, AnalysisResult, ProgressCallback
from next_unused.resolver import load_alias_config
from next_unused.scanner import discover_files, find_entry_points

logger = logging.getLogger(__name__)


def find_unused_files(
    project_root: Path,
    discovered_files: list[Path],
    entry_points: list[Path],
    alias_config: AliasConfig | None = None,
    max_workers: int = 8,
    progress: ProgressCallback | None = None,
) -> AnalysisResult:
    """Run the reachability engine over an already-discovered file set.

    Raises:
        ConfigurationError: no entry points, or ``project_root`` is not a
            directory. Raised before any file is read.
    """
    if not entry_points:
        raise ConfigurationError("No entry points given; cannot determine unused files.")
    _check_root(project_root)

    files = _dedupe([p.resolve() for p in discovered_files])
    entries = _dedupe([p.resolve() for p in entry_points])

    builder = DependencyGraphBuilder(project_root, alias_config, max_workers=max_workers)
    graph = builder.build(files, progress=progress)

    if progress:
        progress("Traversing", 0, 1)
    reachable = find_reachable(graph.forward, entries)
    unused = find_unused(files, reachable)
    if progress:
        progress("Traversing", 1, 1)

    logger.info(
        "%d files, %d entry points, %d reachable, %d unused",
        len(files), len(entries), len(reachable), len(unused),
    )
    return AnalysisResult(
        project_root=project_root.resolve(),
        files=files,
        entry_points=entries,
        reachable=reachable,
        unused=unused,
        failures=list(graph.failures),
    )


def run_analysis(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
    extra_entries: Iterable[Path] = (),
) -> AnalysisResult:
    """Discover files and entry points for a project, then run the engine."""
    root = config.project_root
    _check_root(root)
    root = root.resolve()

    if progress:
        progress("Scanning", 0, 1)
    files = discover_files(root, skip_dirs=config.skip_dirs)
    if progress:
        progress("Scanning", 1, 1)

    entries = find_entry_points(config.router_dir, config.router, files=files)
    for extra in extra_entries:
        path = extra if extra.is_absolute() else root / extra
        if not path.is_file():
            raise ConfigurationError(f"Entry file {path} does not exist.")
        entries.append(path.resolve())

    alias_config = load_alias_config(root, config.config_file)

    return find_unused_files(
        root,
        files,
        entries,
        alias_config=alias_config,
        max_workers=config.max_workers,
        progress=progress,
    )


def _check_root(root: Path) -> None:
    if not root.exists():
        raise ConfigurationError(f'The path "{root}" does not exist or is inaccessible.')
    if not root.is_dir():
        raise ConfigurationError(
            f'The path "{root}" is not a directory. Please provide a valid directory path.'
        )


def _dedupe(paths: list[Path]) -> list[Path]:
    seen: set[Path] = set()
    out: list[Path] = []
    for p in paths:
        if p not in seen:
            seen.add(p)
            out.append(p)
    return out
